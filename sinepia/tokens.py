"""Kinds of lexical tokens and how they read in messages."""

from __future__ import annotations

from enum import Enum


class TokenKind(Enum):
    """A kind of token; its value is the wording used in diagnostics."""

    AND = "`&`"
    AND_AND = "`&&`"
    AND_EQ = "`&=`"
    BRACE_CLOSE = "`}`"
    BRACE_OPEN = "`{`"
    CARET = "`^`"
    CARET_EQ = "`^=`"
    COLON = "`:`"
    COMMA = "`,`"
    CONJUNCTION = "`∧`"
    DISJUNCTION = "`∨`"
    EQ = "`=`"
    EQ_EQ = "`==`"
    EXISTS = "`∃`"
    FORALL = "`∀`"
    GE = "`>=`"
    GT = "`>`"
    IMPLICATION = "`⟶`"
    LE = "`<=`"
    LT = "`<`"
    MAGIC_WAND = "`--*`"
    MINUS = "`-`"
    MINUS_EQ = "`-=`"
    NE = "`!=`"
    NOT = "`!`"
    OR = "`|`"
    OR_EQ = "`|=`"
    OR_OR = "`||`"
    PAREN_CLOSE = "`)`"
    PAREN_OPEN = "`(`"
    PERCENT = "`%`"
    PERCENT_EQ = "`%=`"
    PLUS = "`+`"
    PLUS_EQ = "`+=`"
    R_ARROW = "`->`"
    SEMI = "`;`"
    SHL = "`<<`"
    SHL_EQ = "`<<=`"
    SHR = "`>>`"
    SHR_EQ = "`>>=`"
    SLASH = "`\\`"
    SLASH_EQ = "`\\=`"
    STAR = "`*`"
    STAR_EQ = "`*=`"
    STAR_STAR = "`**`"
    ASSUMING = "`assuming`"
    BREAK = "`break`"
    CONTINUE = "`continue`"
    ELSE = "`else`"
    ERGO = "`ergo`"
    FN = "`fn`"
    IF = "`if`"
    LET = "`let`"
    LOOP = "`loop`"
    PROOF = "`apply`"
    QED = "`qed`"
    RETURN = "`return`"
    WHILE = "`while`"
    IDENT = "an identifier"
    NUMBER = "a number"
    SPACE = "spaces"
    COMMENT = "a comment"
    TRUE = "`true`"
    FALSE = "`false`"

    def describe(self) -> str:
        """How the token is named in a diagnostic message."""
        return self.value

    def __str__(self) -> str:
        return self.value