"""LIFO stack built on the dynamic vector."""

from __future__ import annotations

from typing import Any

from algokit.vector import Vector


class Stack:
    """Last-in, first-out container."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items = Vector()

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        size = len(self._items)
        self._items.resize(size + 1)
        self._items[size] = data

    def top(self) -> Any:
        """Return the element on top without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[len(self._items) - 1]

    def pop(self) -> Any:
        """Remove and return the element on top."""
        value = self.top()
        self._items.resize(len(self._items) - 1)
        return value

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"