"""Byte spans over source text, source files and newline lookup."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, replace
from functools import cached_property
from pathlib import Path
from typing import Optional

_U32_MAX = 2**32 - 1


@dataclass(frozen=True, order=True)
class Span:
    """A half-open range ``[lo, hi)`` of byte offsets into a source file."""

    lo: int = 0
    hi: int = 0

    def __post_init__(self) -> None:
        for name in ("lo", "hi"):
            value = getattr(self, name)
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"span bound {name}={value} is out of range")

    def __str__(self) -> str:
        return f"({self.lo}, {self.hi})"

    def with_lo(self, lo: int) -> Span:
        """Return a copy with a new start offset."""
        return replace(self, lo=lo)

    def with_hi(self, hi: int) -> Span:
        """Return a copy with a new end offset."""
        return replace(self, hi=hi)

    def is_dummy(self) -> bool:
        """True for the placeholder span ``(0, 0)``."""
        return self.lo == 0 and self.hi == 0

    def contains(self, other: Span) -> bool:
        """True if this span fully encloses ``other``."""
        return self.lo <= other.lo and other.hi <= self.hi

    def shrink_to_lo(self) -> Span:
        """An empty span at the start of this one."""
        return self.with_hi(self.lo)

    def shrink_to_hi(self) -> Span:
        """An empty span at the end of this one."""
        return self.with_lo(self.hi)

    def is_empty(self) -> bool:
        """True if the span covers no bytes."""
        return self.hi == self.lo

    def substitute_dummy(self, other: Span) -> Span:
        """Return ``other`` if this is the dummy span, else this span."""
        return other if self.is_dummy() else self

    def overlaps(self, other: Span) -> bool:
        """True if the two spans share at least one byte."""
        return self.lo < other.hi and other.lo < self.hi

    def overlaps_or_adjacent(self, other: Span) -> bool:
        """True if the spans overlap or touch end to end."""
        return self.lo <= other.hi and other.lo <= self.hi

    def source_equal(self, other: Span) -> bool:
        """True if both spans point to the same bytes."""
        return self.lo == other.lo and self.hi == other.hi

    def trim_start(self, other: Span) -> Optional[Span]:
        """This span with its start cut at the end of ``other``, if anything is left."""
        if self.hi > other.hi:
            return self.with_lo(max(self.lo, other.hi))
        return None

    def trim_end(self, other: Span) -> Optional[Span]:
        """This span with its end cut at the start of ``other``, if anything is left."""
        if self.lo < other.lo:
            return self.with_hi(min(self.hi, other.lo))
        return None

    def as_range(self) -> range:
        """The byte offsets covered, as a ``range``."""
        return range(self.lo, self.hi)


@dataclass(frozen=True)
class SourceFile:
    """A source file: its path and its full text."""

    path: Path = Path()
    content: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @cached_property
    def _encoded(self) -> bytes:
        return self.content.encode("utf-8")

    def last_span(self) -> Span:
        """An empty span at the last byte of the file."""
        size = len(self._encoded)
        if size == 0:
            raise ValueError("an empty source file has no last span")
        return Span(size - 1, size - 1)

    def at_span(self, span: Span) -> str:
        """The text covered by ``span``."""
        data = self._encoded
        if span.lo > span.hi or span.hi > len(data):
            raise ValueError(f"span {span} is outside the source of {len(data)} bytes")
        try:
            return data[span.lo : span.hi].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"span {span} does not lie on character boundaries") from exc


@dataclass(frozen=True)
class NewlinesLocs:
    """Byte offsets where each line starts, ending with the total size.

    Lines are counted from zero.
    """

    locs: tuple[int, ...]

    def line_count(self) -> int:
        """Number of recorded offsets."""
        return len(self.locs)

    def line_span(self, line_idx: int) -> Span:
        """The byte span of line ``line_idx``."""
        if not 0 <= line_idx < len(self.locs) - 1:
            raise IndexError(f"line index {line_idx} is out of range")
        return Span(self.locs[line_idx], self.locs[line_idx + 1])

    def line_index(self, byte_index: int) -> Optional[int]:
        """The line holding ``byte_index``, or None past the end."""
        if byte_index < 0:
            raise ValueError(f"byte index {byte_index} is negative")
        pos = bisect_right(self.locs, byte_index)
        if pos == len(self.locs):
            return None
        return pos - 1

    def total_bytes(self) -> int:
        """Size of the file in bytes."""
        return self.locs[-1]


def get_newlines(src: SourceFile) -> NewlinesLocs:
    """Compute the line start offsets of ``src``."""
    data = src.content.encode("utf-8")
    locs = [0]
    locs.extend(offset + 1 for offset, byte in enumerate(data) if byte == 0x0A)
    locs.append(len(data))
    return NewlinesLocs(tuple(locs))