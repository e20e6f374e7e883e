from dataclasses import FrozenInstanceError

import pytest

from sinepia.span import Span
from sinepia.syntax.token import TokenNode
from sinepia.tokens import TokenKind


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenKind.BRACE_OPEN, "BraceOpen"),
        (TokenKind.BRACE_CLOSE, "BraceClose"),
        (TokenKind.PAREN_OPEN, "ParenOpen"),
        (TokenKind.PAREN_CLOSE, "ParenClose"),
        (TokenKind.COMMA, "Comma"),
    ],
)
def test_bare_tokens_print_name_only(kind, text):
    assert str(TokenNode(kind, Span(3, 4))) == text


@pytest.mark.parametrize(
    "kind, name", [(TokenKind.BREAK, "Break"), (TokenKind.CONTINUE, "Continue")]
)
def test_keywords_print_with_span(kind, name):
    span = Span(3, 8)
    assert str(TokenNode(kind, span)) == f"{name}@{span}"


@pytest.mark.parametrize(
    "kind, name",
    [
        (TokenKind.R_ARROW, "RArrow"),
        (TokenKind.EQ_EQ, "EqEq"),
        (TokenKind.MAGIC_WAND, "MagicWand"),
        (TokenKind.STAR_STAR, "StarStar"),
        (TokenKind.ASSUMING, "Assuming"),
    ],
)
def test_names(kind, name):
    assert TokenNode(kind).name == name


def test_equality_by_kind_and_span():
    first = TokenNode(TokenKind.SEMI, Span(1, 2))
    same = TokenNode(TokenKind.SEMI, Span(1, 2))
    moved = TokenNode(TokenKind.SEMI, Span(5, 6))
    assert first == same
    assert hash(first) == hash(same)
    assert first != moved


@pytest.mark.parametrize(
    "kind",
    [TokenKind.IDENT, TokenKind.NUMBER, TokenKind.SPACE, TokenKind.COMMENT, TokenKind.TRUE, TokenKind.FALSE],
)
def test_rejects_text_tokens(kind):
    with pytest.raises(ValueError):
        TokenNode(kind, Span(0, 1))


def test_is_immutable():
    node = TokenNode(TokenKind.FN, Span(0, 2))
    with pytest.raises(FrozenInstanceError):
        node.span = Span(1, 3)