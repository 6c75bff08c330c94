"""Fixed-size array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Array:
    """A non-resizeable sequence of slots, each initially holding ``fill``."""

    __slots__ = ("_items",)

    def __init__(self, size: int, fill: Any = None) -> None:
        if size < 0:
            raise ValueError(f"array size must be non-negative, got {size}")
        self._items = [fill] * size

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index {index} out of range")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Array({self._items!r})"