"""Compiler diagnostics and the reports built from them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Iterable, Optional

from .span import SourceFile, Span
from .tokens import TokenKind


class Severity(Enum):
    """How serious a report is."""

    BUG = "bug"
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"


@dataclass(frozen=True)
class Label:
    """A span of a file pointed at by a report, with optional text."""

    file: SourceFile
    span: Span
    message: str = ""
    primary: bool = True

    def with_message(self, message: str) -> Label:
        """Return a copy carrying ``message``."""
        return replace(self, message=message)


@dataclass(frozen=True)
class Report:
    """A renderable diagnostic: severity, code, message, labels and notes."""

    severity: Severity
    message: str = ""
    code: Optional[str] = None
    labels: tuple[Label, ...] = ()
    notes: tuple[str, ...] = ()

    def with_message(self, message: str) -> Report:
        return replace(self, message=message)

    def with_code(self, code: str) -> Report:
        return replace(self, code=code)

    def with_labels(self, labels: Iterable[Label]) -> Report:
        """Return a copy with ``labels`` appended."""
        return replace(self, labels=self.labels + tuple(labels))

    def with_notes(self, notes: Iterable[str]) -> Report:
        """Return a copy with ``notes`` appended."""
        return replace(self, notes=self.notes + tuple(notes))

    def __str__(self) -> str:
        head = self.severity.value
        if self.code:
            head += f"[{self.code}]"
        lines = [f"{head}: {self.message}"]
        for label in self.labels:
            arrow = "-->" if label.primary else "..."
            line = f"  {arrow} {label.file.path}@{label.span}"
            if label.message:
                line += f": {label.message}"
            lines.append(line)
        lines.extend(f"  = {note}" for note in self.notes)
        return "\n".join(lines)


class Diagnostic(Exception):
    """A problem found in a source file; raised by the compiler stages."""

    CODE: ClassVar[str]
    MESSAGE: ClassVar[str]
    VERBOSE_DESCRIPTION: ClassVar[str]
    SEVERITY: ClassVar[Severity]

    file: SourceFile
    loc: Span

    def update_diag(self, diag: Report) -> Report:
        """Add this diagnostic's labels to ``diag``."""
        return diag.with_labels([Label(self.file, self.loc)])

    def as_diagnostic(self) -> Report:
        """Build the full report for this diagnostic."""
        cls = type(self)
        diag = Report(cls.SEVERITY).with_message(cls.MESSAGE).with_code(cls.CODE)
        return self.update_diag(diag)

    def __str__(self) -> str:
        return str(self.as_diagnostic())


def _expected_list(expected: tuple[TokenKind, ...]) -> str:
    if len(expected) == 1:
        return f"Expected {expected[0]}."
    return f"Expected one of: {', '.join(str(t) for t in expected)}."


@dataclass(unsafe_hash=True)
class UnknownToken(Diagnostic):
    """Text the lexer could not match to any token."""

    CODE: ClassVar[str] = "E001"
    MESSAGE: ClassVar[str] = "Syntax error"
    VERBOSE_DESCRIPTION: ClassVar[str] = "Unkown token"
    SEVERITY: ClassVar[Severity] = Severity.ERROR

    file: SourceFile
    loc: Span

    def update_diag(self, diag: Report) -> Report:
        return diag.with_labels([Label(self.file, self.loc)])


@dataclass(unsafe_hash=True)
class UnexpectedToken(Diagnostic):
    """A token other than one of the expected kinds."""

    CODE: ClassVar[str] = "E002"
    MESSAGE: ClassVar[str] = "Syntax error"
    VERBOSE_DESCRIPTION: ClassVar[str] = "Unexpected token"
    SEVERITY: ClassVar[Severity] = Severity.ERROR

    file: SourceFile
    expected: tuple[TokenKind, ...]
    found: TokenKind
    loc: Span

    def __post_init__(self) -> None:
        self.expected = tuple(self.expected)

    def message(self) -> str:
        """The label text naming what was expected and what was found."""
        return f"{_expected_list(self.expected)} Instead found {self.found}"

    def update_diag(self, diag: Report) -> Report:
        return diag.with_labels([Label(self.file, self.loc, self.message())])


@dataclass(unsafe_hash=True)
class EarlyEof(Diagnostic):
    """The input ended where more tokens were expected."""

    CODE: ClassVar[str] = "E003"
    MESSAGE: ClassVar[str] = "Syntax error"
    VERBOSE_DESCRIPTION: ClassVar[str] = "Unexpected early EOF"
    SEVERITY: ClassVar[Severity] = Severity.ERROR

    file: SourceFile
    expected: tuple[TokenKind, ...]
    loc: Span

    def __post_init__(self) -> None:
        self.expected = tuple(self.expected)

    def message(self) -> str:
        """The label text naming what was expected."""
        return _expected_list(self.expected)

    def update_diag(self, diag: Report) -> Report:
        return diag.with_labels([Label(self.file, self.loc, self.message())])