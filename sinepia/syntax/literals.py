"""Identifiers, literals and type names."""

from __future__ import annotations

from dataclasses import dataclass

from ..span import Span


@dataclass(frozen=True)
class Ident:
    """An identifier and where it was found."""

    data: str
    span: Span = Span()

    def __str__(self) -> str:
        return f"Ident({self.data})@{self.span}"


@dataclass(frozen=True)
class LitBool:
    """A ``true`` or ``false`` literal."""

    data: bool
    span: Span = Span()

    def __str__(self) -> str:
        return f"LitBool({'true' if self.data else 'false'})@{self.span}"


@dataclass(frozen=True)
class LitInt:
    """An integer literal, kept as its source text."""

    data: str
    span: Span = Span()

    def __str__(self) -> str:
        return f"LitInt({self.data})@{self.span}"


@dataclass(frozen=True)
class Type:
    """A type, named by an identifier."""

    ident: Ident

    def __str__(self) -> str:
        return f"Type({self.ident.data})@{self.ident.span}"