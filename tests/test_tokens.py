import pytest

from sinepia.tokens import TokenKind


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenKind.IDENT, "an identifier"),
        (TokenKind.NUMBER, "a number"),
        (TokenKind.SPACE, "spaces"),
        (TokenKind.COMMENT, "a comment"),
        (TokenKind.PROOF, "`apply`"),
        (TokenKind.SLASH, "`\\`"),
        (TokenKind.MAGIC_WAND, "`--*`"),
        (TokenKind.TRUE, "`true`"),
    ],
)
def test_describe(kind, text):
    assert kind.describe() == text


@pytest.mark.parametrize("kind", list(TokenKind))
def test_str_matches_describe(kind):
    assert str(kind) == TokenKind.describe(kind)


def test_str_of_keyword():
    keyword = TokenKind.FN
    assert keyword.describe() == "`fn`"
    assert str(keyword) == "`fn`"
    assert f"Expected {keyword}." == "Expected `fn`."


def test_descriptions_are_distinct():
    descriptions = [TokenKind.describe(kind) for kind in TokenKind]
    assert len(set(descriptions)) == len(descriptions)
    for kind, text in zip(TokenKind, descriptions):
        assert TokenKind(text) is kind


def test_lookup_by_description():
    assert TokenKind("`fn`") is TokenKind.FN
    with pytest.raises(ValueError):
        TokenKind("`nope`")


@pytest.mark.parametrize("kind", list(TokenKind))
def test_symbols_are_quoted(kind):
    unquoted = {TokenKind.IDENT, TokenKind.NUMBER, TokenKind.SPACE, TokenKind.COMMENT}
    text = TokenKind.describe(kind)
    quoted = text.startswith("`") and text.endswith("`")
    assert quoted == (kind not in unquoted)