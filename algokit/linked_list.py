"""Doubly linked list with item handles."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListItem:
    """A node of a :class:`LinkedList`; ``data`` may be changed in place."""

    __slots__ = ("data", "_next", "_prev", "_owner")

    def __init__(self, data: Any, owner: LinkedList) -> None:
        self.data = data
        self._next: ListItem | None = None
        self._prev: ListItem | None = None
        self._owner: LinkedList | None = owner

    @property
    def next(self) -> ListItem | None:
        return self._next

    @property
    def prev(self) -> ListItem | None:
        return self._prev

    def __repr__(self) -> str:
        return f"ListItem({self.data!r})"


class LinkedList:
    """Doubly linked list supporting O(1) insertion and removal at a node."""

    __slots__ = ("_first", "_size")

    def __init__(self) -> None:
        self._first: ListItem | None = None
        self._size = 0

    def _own(self, item: ListItem) -> ListItem:
        if item is None or item._owner is not self:
            raise ValueError("item does not belong to this list")
        return item

    def first(self) -> ListItem | None:
        """Return the first item, or ``None`` if the list is empty."""
        return self._first

    def insert(self, data: Any) -> ListItem:
        """Insert ``data`` at the beginning and return its item."""
        item = ListItem(data, self)
        item._next = self._first
        if self._first is not None:
            self._first._prev = item
        self._first = item
        self._size += 1
        return item

    def insert_after(self, item: ListItem, data: Any) -> ListItem:
        """Insert ``data`` right after ``item`` and return the new item."""
        self._own(item)
        new = ListItem(data, self)
        new._next = item._next
        if item._next is not None:
            item._next._prev = new
        new._prev = item
        item._next = new
        self._size += 1
        return new

    def erase(self, item: ListItem) -> ListItem | None:
        """Remove ``item`` and return the item that followed it."""
        self._own(item)
        following, preceding = item._next, item._prev
        if self._first is item:
            self._first = following
        if following is not None:
            following._prev = preceding
        if preceding is not None:
            preceding._next = following
        item._next = item._prev = None
        item._owner = None
        self._size -= 1
        return following

    def erase_next(self, item: ListItem) -> ListItem | None:
        """Remove the item after ``item`` and return the one after that."""
        self._own(item)
        if item._next is None:
            raise IndexError("no item follows the given one")
        return self.erase(item._next)

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[ListItem]:
        """Yield the list's items from first to last."""
        item = self._first
        while item is not None:
            following = item._next
            yield item
            item = following

    def __iter__(self) -> Iterator[Any]:
        return (item.data for item in self.items())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"