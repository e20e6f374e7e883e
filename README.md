# sinepia

Building blocks for the front end of the Sinepia language. Sinepia is a small
imperative language whose functions may carry Hoare-style pre- and
postconditions (`assuming P, fn ... ergo Q;`).

## What is in the package

- `sinepia.span`
  - `Span` is a half-open range of UTF-8 byte offsets. It has helpers such as
    `contains`, `overlaps`, `trim_start`, `trim_end` and `as_range`.
  - `SourceFile` holds a path and its text. `at_span` returns the text under a
    span, and `last_span` returns an empty span at the last byte.
  - `get_newlines` returns a `NewlinesLocs`, which answers `line_count`,
    `line_span`, `line_index` and `total_bytes`.
- `sinepia.tokens`
  - `TokenKind` is an enum of every token kind. `describe()` and `str()` give
    the wording used in messages, such as `` `->` `` or `an identifier`.
- `sinepia.diagnostics`
  - `Diagnostic` is an exception class. Its subclasses are:
    - `UnknownToken` (`E001`)
    - `UnexpectedToken` (`E002`)
    - `EarlyEof` (`E003`)
  - `as_diagnostic()` builds a `Report`, which holds a `Severity`, a message, a
    code, `Label`s and notes. `str()` of a report renders it as text.
- `sinepia.lexer`
  - `lex` yields `(kind, span)` pairs. Its kind is `None` for a character that
    starts no token.
  - `tokenize` splits text into `SpannedToken`s plus the spans it could not
    recognise.
  - `lex_file` lexes a `SourceFile` into `Tokens`. That object holds the
    tokens and one `UnknownToken` diagnostic per unrecognised character.
- `sinepia.syntax` holds the syntax tree as frozen dataclasses. Every node
  prints a readable description with `str()`.
  - `token`: `TokenNode`, for keywords and punctuation.
  - `punctuated`: `Punctuated` separated sequences and `Enclosed` groups.
  - `literals`: `Ident`, `LitBool`, `LitInt` and `Type`.
  - `expr`: `Expr` and its node types, along with `Block`, `Stmt`, `Local`,
    `BinOp` and `UnOp`.
  - `functions`: `FnArg`, `ReturnType`, `Signature` and `ItemFn`.
  - `logic`: the propositions `PropBin`, `PropExist` and `PropForall`, the
    connective `PropOp`, and `HoareTriplet`.
  - `module`: `ModuleItem` and `Module`.

## Example

```python
from pathlib import Path

from sinepia.lexer import lex_file
from sinepia.span import SourceFile, Span, get_newlines
from sinepia.syntax.expr import Expr
from sinepia.syntax.literals import Ident

src = SourceFile(Path("div.sp"), "fn div(x: u32, y: u32) -> u32 {\n")
tokens = lex_file(src)

for tok in tokens:
    print(tok.kind.name, tok.span, src.at_span(tok.span))

for diag in tokens.diagnostics:
    print(diag.as_diagnostic())

lines = get_newlines(src)
print(lines.line_count(), lines.line_index(5))

print(Expr(Ident("x", Span(7, 8))))   # Expr(Ident(x)@(7, 8))
```

The lexer skips any character it does not recognise and records an
`UnknownToken` for it in `Tokens.diagnostics`.

## What it does not do

The package has no parser that turns tokens into a syntax tree. You build tree
nodes yourself. The package also has no command-line compiler, no type
checking and no verification of the conditions in a Hoare triplet.

## Running the tests

```
pip install .[test]
pytest
```