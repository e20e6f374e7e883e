import pytest

from sinepia.span import Span
from sinepia.syntax.functions import FnArg
from sinepia.syntax.literals import Ident, Type
from sinepia.syntax.logic import (
    HoareTriplet,
    PropBin,
    PropExist,
    PropForall,
    PropOp,
    PropOpKind,
)
from sinepia.syntax.punctuated import Enclosed, Punctuated
from sinepia.syntax.token import TokenNode
from sinepia.tokens import TokenKind


def tok(kind, lo=0, hi=0):
    return TokenNode(kind, Span(lo, hi))


def witness():
    arg = FnArg(Ident("n"), tok(TokenKind.COLON), Type(Ident("u32")))
    return Enclosed(tok(TokenKind.PAREN_OPEN), Punctuated(last=arg), tok(TokenKind.PAREN_CLOSE))


def triple(inner, assume=TokenKind.ASSUMING):
    return HoareTriplet(
        tok(assume, 0, 8),
        Ident("p", Span(9, 10)),
        tok(TokenKind.COMMA),
        inner,
        tok(TokenKind.ERGO),
        Ident("q", Span(20, 21)),
        tok(TokenKind.SEMI),
    )


@pytest.mark.parametrize(
    "kind, token_kind, text",
    [
        (PropOpKind.CONJUNCTION, TokenKind.CONJUNCTION, "Conjunction"),
        (PropOpKind.DISJUNCTION, TokenKind.DISJUNCTION, "Disjunction"),
        (PropOpKind.IMPLICATION, TokenKind.IMPLICATION, "Implication"),
        (PropOpKind.AND_SEPARATELY, TokenKind.STAR_STAR, "AndSeparately"),
        (PropOpKind.MAGIC_WAND, TokenKind.MAGIC_WAND, "MagicWand"),
    ],
)
def test_prop_op_display(kind, token_kind, text):
    assert str(PropOp(kind, tok(token_kind))) == text


def test_prop_op_rejects_wrong_token():
    with pytest.raises(ValueError):
        PropOp(PropOpKind.MAGIC_WAND, tok(TokenKind.STAR_STAR))


def test_prop_bin_display():
    prop = PropBin(
        Ident("p", Span(0, 1)),
        PropOp(PropOpKind.CONJUNCTION, tok(TokenKind.CONJUNCTION, 2, 5)),
        Ident("q", Span(6, 7)),
    )
    assert str(prop) == "PropBin{left: Ident(p)@(0, 1), op: Conjunction, right: Ident(q)@(6, 7)}"


def test_prop_bin_rejects_non_proposition():
    with pytest.raises(TypeError):
        PropBin("p", PropOp(PropOpKind.CONJUNCTION, tok(TokenKind.CONJUNCTION)), Ident("q"))


def test_exists_display():
    body = Ident("p")
    wit = witness()
    text = str(PropExist(tok(TokenKind.EXISTS), wit, body))
    assert text.startswith("Exists{witness: ")
    assert str(wit) in text and str(body) in text


def test_forall_display():
    inner = PropExist(tok(TokenKind.EXISTS), witness(), Ident("p"))
    text = str(PropForall(tok(TokenKind.FORALL), witness(), inner))
    assert text.startswith("PropForall{witness: ")
    assert str(inner) in text


def test_quantifiers_check_their_token():
    with pytest.raises(ValueError):
        PropExist(tok(TokenKind.FORALL), witness(), Ident("p"))
    with pytest.raises(ValueError):
        PropForall(tok(TokenKind.EXISTS), witness(), Ident("p"))


def test_quantifier_rejects_braced_witness():
    bad = Enclosed(tok(TokenKind.BRACE_OPEN), Punctuated(), tok(TokenKind.BRACE_CLOSE))
    with pytest.raises(ValueError):
        PropExist(tok(TokenKind.EXISTS), bad, Ident("p"))


def test_hoare_triplet_display():
    text = str(triple(Ident("f", Span(11, 12))))
    assert text == (
        "HoareTriplet{\nprecondition: Ident(p)@(9, 10),\n"
        "inner: Ident(f)@(11, 12),\npostcondition: Ident(q)@(20, 21)}"
    )


def test_hoare_triplet_keeps_inner():
    inner = Ident("f")
    assert triple(inner).inner is inner


def test_hoare_triplet_rejects_wrong_keyword():
    with pytest.raises(ValueError):
        triple(Ident("f"), assume=TokenKind.ERGO)