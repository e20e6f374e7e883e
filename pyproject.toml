[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sinepia"
version = "0.1.0"
description = "Front end of the Sinepia language: spans, tokens, lexer, diagnostics and syntax tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "syntax-tree", "diagnostics", "hoare-logic", "verification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sinepia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
