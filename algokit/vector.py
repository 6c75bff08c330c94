"""Dynamic array with geometric capacity growth."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_GROWTH_FACTOR = 2


class Vector:
    """A resizeable sequence whose storage doubles when it runs out of room."""

    __slots__ = ("_storage", "_length")

    def __init__(self) -> None:
        self._storage: list[Any] = []
        self._length = 0

    def _check(self, index: int) -> int:
        if not 0 <= index < self._length:
            raise IndexError(f"vector index {index} out of range")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._storage[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._storage[self._check(index)] = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage[: self._length])

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return len(self._storage)

    def reserve(self, size: int) -> None:
        """Ensure room for at least ``size`` elements."""
        capacity = len(self._storage)
        if capacity >= size:
            return
        capacity = max(capacity, 1)
        while capacity < size:
            capacity *= _GROWTH_FACTOR
        self._storage.extend([None] * (capacity - len(self._storage)))

    def resize(self, size: int) -> None:
        """Change the number of elements; new slots hold ``None``."""
        if size < 0:
            raise ValueError(f"vector size must be non-negative, got {size}")
        if size > len(self._storage):
            self.reserve(size)
        if size < self._length:
            self._storage[size : self._length] = [None] * (self._length - size)
        self._length = size

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"