"""Splitting source text into spanned tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from .diagnostics import UnknownToken
from .span import SourceFile, Span
from .tokens import TokenKind

_LITERALS: tuple[tuple[str, TokenKind], ...] = (
    ("&", TokenKind.AND),
    ("&&", TokenKind.AND_AND),
    ("&=", TokenKind.AND_EQ),
    ("}", TokenKind.BRACE_CLOSE),
    ("{", TokenKind.BRACE_OPEN),
    ("^", TokenKind.CARET),
    ("^=", TokenKind.CARET_EQ),
    (":", TokenKind.COLON),
    (",", TokenKind.COMMA),
    ("∧", TokenKind.CONJUNCTION),
    ("∨", TokenKind.DISJUNCTION),
    ("=", TokenKind.EQ),
    ("==", TokenKind.EQ_EQ),
    ("∃", TokenKind.EXISTS),
    ("∀", TokenKind.FORALL),
    (">=", TokenKind.GE),
    (">", TokenKind.GT),
    ("⟶", TokenKind.IMPLICATION),
    ("<=", TokenKind.LE),
    ("<", TokenKind.LT),
    ("--*", TokenKind.MAGIC_WAND),
    ("-", TokenKind.MINUS),
    ("-=", TokenKind.MINUS_EQ),
    ("!=", TokenKind.NE),
    ("!", TokenKind.NOT),
    ("|", TokenKind.OR),
    ("|=", TokenKind.OR_EQ),
    ("||", TokenKind.OR_OR),
    (")", TokenKind.PAREN_CLOSE),
    ("(", TokenKind.PAREN_OPEN),
    ("%", TokenKind.PERCENT),
    ("%=", TokenKind.PERCENT_EQ),
    ("+", TokenKind.PLUS),
    ("+=", TokenKind.PLUS_EQ),
    ("->", TokenKind.R_ARROW),
    (";", TokenKind.SEMI),
    ("<<", TokenKind.SHL),
    ("<<=", TokenKind.SHL_EQ),
    (">>", TokenKind.SHR),
    (">>=", TokenKind.SHR_EQ),
    ("/", TokenKind.SLASH),
    ("/=", TokenKind.SLASH_EQ),
    ("*", TokenKind.STAR),
    ("*=", TokenKind.STAR_EQ),
    ("**", TokenKind.STAR_STAR),
    ("assuming", TokenKind.ASSUMING),
    ("break", TokenKind.BREAK),
    ("continue", TokenKind.CONTINUE),
    ("else", TokenKind.ELSE),
    ("ergo", TokenKind.ERGO),
    ("false", TokenKind.FALSE),
    ("fn", TokenKind.FN),
    ("if", TokenKind.IF),
    ("let", TokenKind.LET),
    ("loop", TokenKind.LOOP),
    ("proof", TokenKind.PROOF),
    ("qed", TokenKind.QED),
    ("return", TokenKind.RETURN),
    ("true", TokenKind.TRUE),
    ("while", TokenKind.WHILE),
)

_PATTERNS: tuple[tuple[re.Pattern[str], TokenKind], ...] = (
    (re.compile(r"[a-zA-Z_][a-zA-Z0-9]*"), TokenKind.IDENT),
    (re.compile(r"[0-9]+"), TokenKind.NUMBER),
    (re.compile(r"[ \r\t\n]+"), TokenKind.SPACE),
    (re.compile(r"//[^\n]*"), TokenKind.COMMENT),
)


@dataclass(frozen=True)
class SpannedToken:
    """A token kind with the byte span it was read from."""

    kind: TokenKind
    span: Span


@dataclass(frozen=True)
class Tokens:
    """The tokens of a source file and the diagnostics raised while lexing it."""

    file: SourceFile
    tokens: tuple[SpannedToken, ...] = ()
    diagnostics: tuple[UnknownToken, ...] = ()

    def __iter__(self) -> Iterator[SpannedToken]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> SpannedToken:
        return self.tokens[index]


def _longest_match(text: str, pos: int) -> tuple[Optional[TokenKind], int]:
    """Kind and character length of the longest token at ``pos``.

    Literal tokens win ties against the pattern tokens, so keywords are not
    read as identifiers.
    """
    best_kind: Optional[TokenKind] = None
    best_len = 0
    for literal, kind in _LITERALS:
        if len(literal) > best_len and text.startswith(literal, pos):
            best_kind, best_len = kind, len(literal)
    for pattern, kind in _PATTERNS:
        match = pattern.match(text, pos)
        if match and match.end() - pos > best_len:
            best_kind, best_len = kind, match.end() - pos
    return best_kind, best_len


def lex(text: str) -> Iterator[tuple[Optional[TokenKind], Span]]:
    """Yield ``(kind, span)`` for each token of ``text``.

    Spans are in UTF-8 bytes. A character that starts no token is yielded
    alone with kind None.
    """
    pos = 0
    offset = 0
    while pos < len(text):
        kind, length = _longest_match(text, pos)
        if kind is None:
            length = 1
        size = len(text[pos : pos + length].encode("utf-8"))
        yield kind, Span(offset, offset + size)
        pos += length
        offset += size


def tokenize(text: str) -> tuple[list[SpannedToken], list[Span]]:
    """Split ``text`` into tokens and the spans of unrecognised text."""
    tokens: list[SpannedToken] = []
    errors: list[Span] = []
    for kind, span in lex(text):
        if kind is None:
            errors.append(span)
        else:
            tokens.append(SpannedToken(kind, span))
    return tokens, errors


def lex_file(src: SourceFile) -> Tokens:
    """Lex a whole source file, reporting unknown text as diagnostics."""
    tokens, errors = tokenize(src.content)
    diagnostics = tuple(UnknownToken(src, span) for span in errors)
    return Tokens(src, tuple(tokens), diagnostics)