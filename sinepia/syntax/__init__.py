"""Syntax tree nodes of the Sinepia language: tokens, literals, expressions, functions, logic and modules."""