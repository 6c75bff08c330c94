"""FIFO queue made of two stacks."""

from __future__ import annotations

from typing import Any

from algokit.stack import Stack


class Queue:
    """First-in, first-out container with amortised O(1) operations."""

    __slots__ = ("_inbox", "_outbox")

    def __init__(self) -> None:
        self._inbox = Stack()
        self._outbox = Stack()

    def insert(self, data: Any) -> None:
        """Append ``data`` at the back of the queue."""
        self._inbox.push(data)

    def _refill(self) -> None:
        if self._outbox:
            return
        while self._inbox:
            self._outbox.push(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def front(self) -> Any:
        """Return the oldest element without removing it."""
        self._refill()
        return self._outbox.top()

    def remove(self) -> Any:
        """Remove and return the oldest element."""
        self._refill()
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __bool__(self) -> bool:
        return len(self) > 0