"""Propositions and Hoare triples."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from ..tokens import TokenKind
from .functions import FnArg
from .literals import Ident
from .punctuated import Enclosed, Punctuated
from .token import TokenNode

T = TypeVar("T")

Prop = Union["PropExist", "PropForall", "PropBin", Ident]


def _require(token: TokenNode, kind: TokenKind, role: str) -> None:
    if not isinstance(token, TokenNode):
        raise TypeError(f"{role} must be a token, not {type(token).__name__}")
    if token.kind is not kind:
        raise ValueError(f"{role} must be a {kind.name} token, not {token.kind.name}")


def _require_prop(value: object, role: str) -> None:
    if not isinstance(value, (PropExist, PropForall, PropBin, Ident)):
        raise TypeError(f"{role} must be a proposition, not {type(value).__name__}")


def _require_witness(witness: Enclosed) -> None:
    _require(witness.open, TokenKind.PAREN_OPEN, "witness list opening")
    _require(witness.close, TokenKind.PAREN_CLOSE, "witness list closing")
    if not isinstance(witness.inner, Punctuated):
        raise TypeError("witness list must be a Punctuated sequence")


class PropOpKind(Enum):
    """A logical connective; its value is the name it prints as."""

    CONJUNCTION = "Conjunction"
    DISJUNCTION = "Disjunction"
    IMPLICATION = "Implication"
    AND_SEPARATELY = "AndSeparately"
    MAGIC_WAND = "MagicWand"


_PROPOP_TOKENS: dict[PropOpKind, TokenKind] = {
    PropOpKind.CONJUNCTION: TokenKind.CONJUNCTION,
    PropOpKind.DISJUNCTION: TokenKind.DISJUNCTION,
    PropOpKind.IMPLICATION: TokenKind.IMPLICATION,
    PropOpKind.AND_SEPARATELY: TokenKind.STAR_STAR,
    PropOpKind.MAGIC_WAND: TokenKind.MAGIC_WAND,
}


@dataclass(frozen=True)
class PropOp:
    """A logical connective together with the token it was written as."""

    kind: PropOpKind
    token: TokenNode

    def __post_init__(self) -> None:
        _require(self.token, _PROPOP_TOKENS[self.kind], f"{self.kind.value} connective")

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class PropBin:
    """Two propositions joined by a connective."""

    left: Prop
    op: PropOp
    right: Prop

    def __post_init__(self) -> None:
        _require_prop(self.left, "left operand")
        _require_prop(self.right, "right operand")

    def __str__(self) -> str:
        return f"PropBin{{left: {self.left}, op: {self.op}, right: {self.right}}}"


@dataclass(frozen=True)
class PropExist:
    """An existential proposition over the given witnesses."""

    exists_token: TokenNode
    witness: Enclosed[TokenNode, Punctuated[FnArg, TokenNode], TokenNode]
    prop: Prop

    def __post_init__(self) -> None:
        _require(self.exists_token, TokenKind.EXISTS, "existential quantifier")
        _require_witness(self.witness)
        _require_prop(self.prop, "quantified body")

    def __str__(self) -> str:
        return f"Exists{{witness: {self.witness}, prop: {self.prop}}}"


@dataclass(frozen=True)
class PropForall:
    """A universal proposition over the given variables."""

    forall_token: TokenNode
    witness: Enclosed[TokenNode, Punctuated[FnArg, TokenNode], TokenNode]
    prop: Prop

    def __post_init__(self) -> None:
        _require(self.forall_token, TokenKind.FORALL, "universal quantifier")
        _require_witness(self.witness)
        _require_prop(self.prop, "quantified body")

    def __str__(self) -> str:
        return f"PropForall{{witness: {self.witness}, prop: {self.prop}}}"


@dataclass(frozen=True)
class HoareTriplet(Generic[T]):
    """``assuming P, item ergo Q;``: an item with its pre- and postcondition."""

    assume_token: TokenNode
    precondition: Prop
    comma_token: TokenNode
    inner: T
    ergo_token: TokenNode
    post_condition: Prop
    semi_token: TokenNode

    def __post_init__(self) -> None:
        _require(self.assume_token, TokenKind.ASSUMING, "assuming keyword")
        _require(self.comma_token, TokenKind.COMMA, "precondition separator")
        _require(self.ergo_token, TokenKind.ERGO, "ergo keyword")
        _require(self.semi_token, TokenKind.SEMI, "triple terminator")
        _require_prop(self.precondition, "precondition")
        _require_prop(self.post_condition, "postcondition")

    def __str__(self) -> str:
        return (
            f"HoareTriplet{{\nprecondition: {self.precondition},\n"
            f"inner: {self.inner},\npostcondition: {self.post_condition}}}"
        )