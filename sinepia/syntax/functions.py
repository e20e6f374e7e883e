"""Function items, signatures and parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..tokens import TokenKind
from .expr import Block
from .literals import Ident, Type
from .punctuated import Enclosed, Punctuated
from .token import TokenNode


def _require(token: TokenNode, kind: TokenKind, role: str) -> None:
    if not isinstance(token, TokenNode):
        raise TypeError(f"{role} must be a token, not {type(token).__name__}")
    if token.kind is not kind:
        raise ValueError(f"{role} must be a {kind.name} token, not {token.kind.name}")


@dataclass(frozen=True)
class FnArg:
    """A parameter: a name and its type."""

    name: Ident
    colon_token: TokenNode
    ty: Type

    def __post_init__(self) -> None:
        _require(self.colon_token, TokenKind.COLON, "parameter colon")

    def __str__(self) -> str:
        return f"FnArg({self.name}: {self.ty})"


@dataclass(frozen=True)
class ReturnType:
    """The declared result of a function; unit when no arrow is written."""

    arrow: Optional[TokenNode] = None
    ty: Optional[Type] = None

    def __post_init__(self) -> None:
        if (self.arrow is None) != (self.ty is None):
            raise ValueError("a return type needs both its arrow and its type")
        if self.arrow is not None:
            _require(self.arrow, TokenKind.R_ARROW, "return arrow")

    @property
    def is_default(self) -> bool:
        """True when no return type was written."""
        return self.ty is None

    def __str__(self) -> str:
        if self.ty is None:
            return "ReturnType(Unit)"
        return f"ReturnType({self.ty})"


@dataclass(frozen=True)
class Signature:
    """A function's name, parameters and return type."""

    fn_token: TokenNode
    ident: Ident
    inputs: Enclosed[TokenNode, Punctuated[FnArg, TokenNode], TokenNode]
    output: ReturnType = ReturnType()

    def __post_init__(self) -> None:
        _require(self.fn_token, TokenKind.FN, "fn keyword")
        _require(self.inputs.open, TokenKind.PAREN_OPEN, "parameter list opening")
        _require(self.inputs.close, TokenKind.PAREN_CLOSE, "parameter list closing")

    def __str__(self) -> str:
        return (
            f"Signature{{ ident: {self.ident}, inputs: {self.inputs}, "
            f"output: {self.output}}}"
        )


@dataclass(frozen=True)
class ItemFn:
    """A function definition: its signature and body."""

    sig: Signature
    block: Block

    def __str__(self) -> str:
        return f"ItemFn{{sig: {self.sig}, block: {self.block}}}"