import pytest

from sinepia.span import Span
from sinepia.syntax.punctuated import Enclosed, Punctuated
from sinepia.syntax.token import TokenNode
from sinepia.tokens import TokenKind


def comma(lo=0):
    return TokenNode(TokenKind.COMMA, Span(lo, lo + 1))


def build(values, trailing=False):
    seq = Punctuated()
    for index, value in enumerate(values):
        if index:
            seq.push_punct(comma(index))
        seq.push_value(value)
    if trailing:
        seq.push_punct(comma(99))
    return seq


def test_empty():
    seq = Punctuated()
    assert seq.is_empty()
    assert len(seq) == 0
    assert not seq.trailing()
    assert seq.empty_or_trailing()
    assert str(seq) == "Punctuated()[]"


def test_one():
    seq = build(["foo"])
    assert len(seq) == 1
    assert not seq.trailing()
    assert not seq.is_empty()


def test_one_trailing():
    seq = build(["foo"], trailing=True)
    assert len(seq) == 1
    assert seq.trailing()
    assert seq.last is None


def test_multi():
    seq = build(["foo", "bar", "baz"])
    assert len(seq) == 3
    assert not seq.trailing()
    assert list(seq) == ["foo", "bar", "baz"]


def test_multi_trailing():
    seq = build(["foo", "bar", "baz"], trailing=True)
    assert len(seq) == 3
    assert seq.trailing()
    assert list(seq) == ["foo", "bar", "baz"]


def test_push_value_twice_raises():
    seq = build(["foo"])
    with pytest.raises(ValueError):
        seq.push_value("bar")


def test_push_punct_on_empty_raises():
    with pytest.raises(ValueError):
        Punctuated().push_punct(comma())


def test_push_punct_twice_raises():
    seq = build(["foo"], trailing=True)
    with pytest.raises(ValueError):
        seq.push_punct(comma())


def test_push_inserts_default_punctuation():
    seq = Punctuated(punct_factory=comma)
    seq.push("a")
    seq.push("b")
    assert seq.inner == [("a", comma())]
    assert seq.last == "b"


def test_push_without_factory_raises_when_separator_needed():
    seq = Punctuated()
    seq.push("a")
    with pytest.raises(ValueError):
        seq.push("b")


def test_push_after_trailing_needs_no_factory():
    seq = build(["a"], trailing=True)
    seq.push("b")
    assert list(seq) == ["a", "b"]


def test_extend_round_trip():
    values = ["x", "y", "z", "w"]
    seq = Punctuated(punct_factory=comma)
    seq.extend(values)
    assert list(seq) == values
    assert len(seq) == len(values)


def test_clear():
    seq = build(["a", "b"])
    seq.clear()
    assert seq.is_empty()
    assert list(seq) == []


def test_str_lists_items_and_first_punctuation():
    seq = build(["a", "b"])
    assert str(seq) == "Punctuated(Comma)[a, b]"


def test_str_trailing():
    seq = build(["a", "b"], trailing=True)
    assert str(seq) == "Punctuated(Comma)[a, b]"


def test_enclosed_str():
    node = Enclosed(
        TokenNode(TokenKind.PAREN_OPEN, Span(0, 1)),
        "x",
        TokenNode(TokenKind.PAREN_CLOSE, Span(2, 3)),
    )
    assert str(node) == "Enclosed(ParenOpen, x, ParenClose)"
    assert node.inner == "x"