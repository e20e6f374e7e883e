"""Front end of the Sinepia language: spans, token kinds, diagnostics, lexer and syntax tree."""

__version__ = "0.1.0"