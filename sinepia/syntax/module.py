"""The top-level module: the items of a source file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .functions import ItemFn
from .logic import HoareTriplet


@dataclass(frozen=True)
class ModuleItem:
    """A module item: a function, possibly wrapped in a Hoare triple."""

    item: Union[ItemFn, HoareTriplet[ItemFn]]

    def __post_init__(self) -> None:
        item = self.item
        if isinstance(item, HoareTriplet):
            if not isinstance(item.inner, ItemFn):
                raise TypeError("a Hoare triple item must wrap a function")
        elif not isinstance(item, ItemFn):
            raise TypeError(f"{type(item).__name__} is not a module item")

    def __str__(self) -> str:
        return f"ModuleItem({self.item})"


@dataclass(frozen=True)
class Module:
    """All the items of a source file, in order."""

    items: tuple[ModuleItem, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, ModuleItem):
                raise TypeError(f"{type(item).__name__} is not a module item")
        object.__setattr__(self, "items", items)

    def __iter__(self) -> Iterator[ModuleItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "Module[\n" + "\n".join(str(item) for item in self.items) + "]"