"""Expression, statement and block nodes of the syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..tokens import TokenKind
from .literals import Ident, LitBool, LitInt
from .punctuated import Enclosed, Punctuated
from .token import TokenNode


def _require(token: TokenNode, kind: TokenKind, role: str) -> None:
    if not isinstance(token, TokenNode):
        raise TypeError(f"{role} must be a token, not {type(token).__name__}")
    if token.kind is not kind:
        raise ValueError(f"{role} must be a {kind.name} token, not {token.kind.name}")


class BinOpKind(Enum):
    """A binary operator; its value is the name it prints as."""

    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    REM = "Rem"
    AND = "And"
    OR = "Or"
    BIT_XOR = "BitXor"
    BIT_AND = "BitAnd"
    BIT_OR = "BitOr"
    SHL = "Shl"
    SHR = "Shr"
    EQ_EQ = "EqEq"
    LT = "Lt"
    LE = "Le"
    NE = "Ne"
    GE = "Ge"
    GT = "Gt"
    ADD_ASSIGN = "AddAssign"
    SUB_ASSIGN = "SubAssign"
    MUL_ASSIGN = "MulAssign"
    DIV_ASSIGN = "DivAssign"
    REM_ASSIGN = "RemAssign"
    BIT_XOR_ASSIGN = "BitXorAssign"
    BIT_AND_ASSIGN = "BitAndAssign"
    BIT_OR_ASSIGN = "BitOrAssign"
    SHL_ASSIGN = "ShlAssign"
    SHR_ASSIGN = "ShrAssign"
    EQ = "Eq"


_BINOP_TOKENS: dict[BinOpKind, TokenKind] = {
    BinOpKind.ADD: TokenKind.PLUS,
    BinOpKind.SUB: TokenKind.MINUS,
    BinOpKind.MUL: TokenKind.STAR,
    BinOpKind.DIV: TokenKind.SLASH,
    BinOpKind.REM: TokenKind.PERCENT,
    BinOpKind.AND: TokenKind.AND_AND,
    BinOpKind.OR: TokenKind.OR_OR,
    BinOpKind.BIT_XOR: TokenKind.CARET,
    BinOpKind.BIT_AND: TokenKind.AND,
    BinOpKind.BIT_OR: TokenKind.OR,
    BinOpKind.SHL: TokenKind.SHL,
    BinOpKind.SHR: TokenKind.SHR,
    BinOpKind.EQ_EQ: TokenKind.EQ_EQ,
    BinOpKind.LT: TokenKind.LT,
    BinOpKind.LE: TokenKind.LE,
    BinOpKind.NE: TokenKind.NE,
    BinOpKind.GE: TokenKind.GE,
    BinOpKind.GT: TokenKind.GT,
    BinOpKind.ADD_ASSIGN: TokenKind.PLUS_EQ,
    BinOpKind.SUB_ASSIGN: TokenKind.MINUS_EQ,
    BinOpKind.MUL_ASSIGN: TokenKind.STAR_EQ,
    BinOpKind.DIV_ASSIGN: TokenKind.SLASH_EQ,
    BinOpKind.REM_ASSIGN: TokenKind.PERCENT_EQ,
    BinOpKind.BIT_XOR_ASSIGN: TokenKind.CARET_EQ,
    BinOpKind.BIT_AND_ASSIGN: TokenKind.AND_EQ,
    BinOpKind.BIT_OR_ASSIGN: TokenKind.OR_EQ,
    BinOpKind.SHL_ASSIGN: TokenKind.SHL_EQ,
    BinOpKind.SHR_ASSIGN: TokenKind.SHR_EQ,
    BinOpKind.EQ: TokenKind.EQ,
}


@dataclass(frozen=True)
class BinOp:
    """A binary operator together with the token it was written as."""

    kind: BinOpKind
    token: TokenNode

    def __post_init__(self) -> None:
        _require(self.token, _BINOP_TOKENS[self.kind], f"{self.kind.value} operator")

    def __str__(self) -> str:
        return self.kind.value


class UnOpKind(Enum):
    """A unary operator; its value is the name it prints as."""

    NOT = "Not"
    NEG = "Neg"


_UNOP_TOKENS: dict[UnOpKind, TokenKind] = {
    UnOpKind.NOT: TokenKind.NOT,
    UnOpKind.NEG: TokenKind.MINUS,
}


@dataclass(frozen=True)
class UnOp:
    """A unary operator together with the token it was written as."""

    kind: UnOpKind
    token: TokenNode

    def __post_init__(self) -> None:
        _require(self.token, _UNOP_TOKENS[self.kind], f"{self.kind.value} operator")

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Expr:
    """An expression of any form, wrapping the node that holds it."""

    node: Union[
        ExprBinary,
        Block,
        TokenNode,
        ExprCall,
        ExprIf,
        Lit,
        ExprLoop,
        ExprReturn,
        Enclosed,
        ExprUnary,
        ExprWhile,
        Ident,
    ]

    def __post_init__(self) -> None:
        node = self.node
        if isinstance(node, TokenNode):
            if node.kind not in (TokenKind.BREAK, TokenKind.CONTINUE):
                raise ValueError(f"{node.kind.name} token is not an expression")
        elif isinstance(node, Enclosed):
            _require(node.open, TokenKind.PAREN_OPEN, "tuple opening")
            _require(node.close, TokenKind.PAREN_CLOSE, "tuple closing")
            if not isinstance(node.inner, Punctuated):
                raise TypeError("tuple contents must be a Punctuated sequence")
        elif not isinstance(node, _EXPR_NODE_TYPES):
            raise TypeError(f"{type(node).__name__} is not an expression node")

    def __str__(self) -> str:
        return f"Expr({self.node})"


@dataclass(frozen=True)
class ExprBinary:
    """Two expressions joined by a binary operator."""

    left: Expr
    op: BinOp
    right: Expr

    def __str__(self) -> str:
        return f"ExprBinary{{left: {self.left}, op: {self.op}, right: {self.right}}}"


@dataclass(frozen=True)
class Local:
    """A ``let`` binding."""

    let_token: TokenNode
    ident: Ident
    eq_token: TokenNode
    expr: Expr
    semi_token: TokenNode

    def __post_init__(self) -> None:
        _require(self.let_token, TokenKind.LET, "let keyword")
        _require(self.eq_token, TokenKind.EQ, "binding `=`")
        _require(self.semi_token, TokenKind.SEMI, "binding terminator")

    def __str__(self) -> str:
        return f"Local{{ident: {self.ident}, expr: {self.expr}}}"


@dataclass(frozen=True)
class Stmt:
    """A statement: a binding, or an expression with an optional semicolon."""

    node: Union[Local, Expr]
    semi: Optional[TokenNode] = None

    def __post_init__(self) -> None:
        if isinstance(self.node, Local):
            if self.semi is not None:
                raise ValueError("a let binding carries its own semicolon")
        elif not isinstance(self.node, Expr):
            raise TypeError(f"{type(self.node).__name__} is not a statement")
        if self.semi is not None:
            _require(self.semi, TokenKind.SEMI, "statement terminator")

    def __str__(self) -> str:
        return f"Stmt({self.node})"


@dataclass(frozen=True)
class Block:
    """Statements between braces."""

    stmts: Enclosed[TokenNode, list[Stmt], TokenNode]

    def __post_init__(self) -> None:
        _require(self.stmts.open, TokenKind.BRACE_OPEN, "block opening")
        _require(self.stmts.close, TokenKind.BRACE_CLOSE, "block closing")
        for stmt in self.stmts.inner:
            if not isinstance(stmt, Stmt):
                raise TypeError(f"{type(stmt).__name__} is not a statement")

    def __str__(self) -> str:
        return "Block(" + "; ".join(str(stmt) for stmt in self.stmts.inner) + ")"


@dataclass(frozen=True)
class ExprCall:
    """A function call."""

    func: Expr
    args: Enclosed[TokenNode, Punctuated[Expr, TokenNode], TokenNode]

    def __post_init__(self) -> None:
        _require(self.args.open, TokenKind.PAREN_OPEN, "argument list opening")
        _require(self.args.close, TokenKind.PAREN_CLOSE, "argument list closing")

    def __str__(self) -> str:
        return f"ExprCall{{func: {self.func}, args:{self.args}}}"


@dataclass(frozen=True)
class ExprIf:
    """An ``if`` expression with an optional ``else`` block."""

    if_token: TokenNode
    cond: Expr
    then_branch: Block
    else_branch: Optional[tuple[TokenNode, Block]] = None

    def __post_init__(self) -> None:
        _require(self.if_token, TokenKind.IF, "if keyword")
        if self.else_branch is not None:
            _require(self.else_branch[0], TokenKind.ELSE, "else keyword")

    def __str__(self) -> str:
        head = f"ExprIf{{cond: {self.cond}, then_branch:{self.then_branch}"
        if self.else_branch is not None:
            return f"{head}, else_branch:{self.else_branch[1]} }}"
        return head + "}"


@dataclass(frozen=True)
class Lit:
    """A literal value used as an expression."""

    value: Union[LitInt, LitBool]

    def __post_init__(self) -> None:
        if not isinstance(self.value, (LitInt, LitBool)):
            raise TypeError(f"{type(self.value).__name__} is not a literal")

    def __str__(self) -> str:
        value = self.value
        if isinstance(value, LitBool):
            data = "true" if value.data else "false"
        else:
            data = value.data
        return f"Lit({data})@{value.span}"


@dataclass(frozen=True)
class ExprLoop:
    """An unconditional ``loop`` block."""

    loop_token: TokenNode
    body: Block

    def __post_init__(self) -> None:
        _require(self.loop_token, TokenKind.LOOP, "loop keyword")

    def __str__(self) -> str:
        return f"Loop({self.body})"


@dataclass(frozen=True)
class ExprReturn:
    """A ``return`` with an optional value."""

    return_token: TokenNode
    expr: Optional[Expr] = None

    def __post_init__(self) -> None:
        _require(self.return_token, TokenKind.RETURN, "return keyword")

    def __str__(self) -> str:
        if self.expr is not None:
            return f"Return({self.expr})"
        return f"Return@{self.return_token.span}"


@dataclass(frozen=True)
class ExprUnary:
    """An expression under a unary operator."""

    op: UnOp
    expr: Expr

    def __str__(self) -> str:
        return f"ExprUnary({self.op} {self.expr})"


@dataclass(frozen=True)
class ExprWhile:
    """A ``while`` loop."""

    while_token: TokenNode
    cond: Expr
    body: Block

    def __post_init__(self) -> None:
        _require(self.while_token, TokenKind.WHILE, "while keyword")

    def __str__(self) -> str:
        return f"While{{cond: {self.cond}, body: {self.body}}}"


_EXPR_NODE_TYPES = (
    ExprBinary,
    Block,
    ExprCall,
    ExprIf,
    Lit,
    ExprLoop,
    ExprReturn,
    ExprUnary,
    ExprWhile,
    Ident,
)