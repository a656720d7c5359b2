"""A singly linked list with in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list whose iteration order matches ``items``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._length = 0
        for item in reversed(list(items)):
            self.push(item)

    def push(self, data: Any) -> None:
        """Insert ``data`` at the front of the list."""
        self._head = _Node(data, self._head)
        self._length += 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        current = self._head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self._head = prev

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length