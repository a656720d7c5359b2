"""A fixed-capacity stack."""

from __future__ import annotations

from typing import Any


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        """Return whether the stack holds ``capacity`` items."""
        return len(self._items) >= self.capacity

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)