"""Separated sequences and delimited groups of syntax nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
P = TypeVar("P")
O = TypeVar("O")
C = TypeVar("C")


@dataclass
class Punctuated(Generic[T, P]):
    """A sequence of values separated by punctuation, with optional trailing one.

    ``punct_factory`` makes the punctuation that :meth:`push` inserts between
    values when the sequence has no trailing punctuation.
    """

    inner: list[tuple[T, P]] = field(default_factory=list)
    last: Optional[T] = None
    punct_factory: Optional[Callable[[], P]] = field(
        default=None, repr=False, compare=False
    )

    def __str__(self) -> str:
        head = f"Punctuated({self.inner[0][1]})[" if self.inner else "Punctuated()["
        items = ", ".join(str(item) for item, _ in self.inner)
        tail = f", {self.last}]" if self.last is not None else "]"
        return head + items + tail

    def is_empty(self) -> bool:
        """True if the sequence holds no values and no punctuation."""
        return not self.inner and self.last is None

    def __len__(self) -> int:
        return len(self.inner) + (1 if self.last is not None else 0)

    def __iter__(self) -> Iterator[T]:
        for item, _ in self.inner:
            yield item
        if self.last is not None:
            yield self.last

    def clear(self) -> None:
        """Remove every value and punctuation."""
        self.inner.clear()
        self.last = None

    def push(self, value: T) -> None:
        """Append ``value``, inserting default punctuation first if needed."""
        if not self.empty_or_trailing():
            if self.punct_factory is None:
                raise ValueError(
                    "Punctuated.push: no default punctuation to separate values"
                )
            self.push_punct(self.punct_factory())
        self.push_value(value)

    def push_value(self, value: T) -> None:
        """Append ``value``; the sequence must be empty or end in punctuation."""
        if not self.empty_or_trailing():
            raise ValueError(
                "Punctuated.push_value: cannot push value if Punctuated is missing "
                "trailing punctuation"
            )
        self.last = value

    def push_punct(self, punctuation: P) -> None:
        """Append trailing punctuation after the last value."""
        if self.last is None:
            raise ValueError(
                "Punctuated.push_punct: cannot push punctuation if Punctuated is "
                "empty or already has trailing punctuation"
            )
        self.inner.append((self.last, punctuation))
        self.last = None

    def empty_or_trailing(self) -> bool:
        """True if the sequence is empty or ends in punctuation."""
        return self.last is None

    def trailing(self) -> bool:
        """True if the sequence is non-empty and ends in punctuation."""
        return bool(self.inner) and self.last is None

    def extend(self, values: Iterable[T]) -> None:
        """Push every value in turn."""
        for value in values:
            self.push(value)


@dataclass(frozen=True)
class Enclosed(Generic[O, T, C]):
    """A node between an opening and a closing delimiter."""

    open: O
    inner: T
    close: C

    def __str__(self) -> str:
        return f"Enclosed({self.open}, {self.inner}, {self.close})"