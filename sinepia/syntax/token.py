"""Punctuation and keyword tokens as they appear in the syntax tree."""

from __future__ import annotations

from dataclasses import dataclass

from ..span import Span
from ..tokens import TokenKind

# Kinds that carry text of their own and become literal nodes instead.
_NON_SYNTAX_KINDS = frozenset(
    {
        TokenKind.IDENT,
        TokenKind.NUMBER,
        TokenKind.SPACE,
        TokenKind.COMMENT,
        TokenKind.TRUE,
        TokenKind.FALSE,
    }
)

# Kinds printed by name alone, without their span.
_BARE_KINDS = frozenset(
    {
        TokenKind.BRACE_OPEN,
        TokenKind.BRACE_CLOSE,
        TokenKind.PAREN_OPEN,
        TokenKind.PAREN_CLOSE,
        TokenKind.COMMA,
    }
)


@dataclass(frozen=True)
class TokenNode:
    """A keyword or punctuation token in the tree, with where it was found."""

    kind: TokenKind
    span: Span = Span()

    def __post_init__(self) -> None:
        if self.kind in _NON_SYNTAX_KINDS:
            raise ValueError(f"{self.kind.name} is not a punctuation or keyword token")

    @property
    def name(self) -> str:
        """The token's name in CamelCase, such as ``RArrow``."""
        return "".join(part.capitalize() for part in self.kind.name.split("_"))

    def __str__(self) -> str:
        if self.kind in _BARE_KINDS:
            return self.name
        return f"{self.name}@{self.span}"