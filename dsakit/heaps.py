"""Array-backed binary heaps and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def heapify(items: list[Any], n: int, i: int) -> None:
    """Sift ``items[i]`` down within the first ``n`` items to restore a max-heap."""
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def build_max_heap(items: Iterable[Any]) -> list[Any]:
    """Return the items arranged as a max-heap."""
    heap = list(items)
    for i in range(len(heap) // 2 - 1, -1, -1):
        heapify(heap, len(heap), i)
    return heap


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted through a max-heap."""
    heap = build_max_heap(items)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        heapify(heap, end, 0)
    return heap


class MaxHeap:
    """A max-heap whose largest item sits at the root."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(items)

    def insert(self, key: Any) -> None:
        """Add ``key`` and sift it up to its place."""
        self._items.append(key)
        i = len(self._items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if self._items[parent] >= self._items[i]:
                break
            self._items[parent], self._items[i] = self._items[i], self._items[parent]
            i = parent

    def delete_root(self) -> Any:
        """Remove and return the largest item."""
        if not self._items:
            raise IndexError("delete from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return root

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class MinHeap:
    """A min-heap that supports deleting any stored key."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)
        for i in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(i)

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            parent = (i - 1) // 2
            if items[parent] <= items[i]:
                break
            items[parent], items[i] = items[i], items[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        items = self._items
        n = len(items)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and items[left] < items[smallest]:
                smallest = left
            if right < n and items[right] < items[smallest]:
                smallest = right
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest

    def insert(self, key: Any) -> None:
        """Add ``key`` and sift it up to its place."""
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise ``ValueError`` if absent."""
        try:
            index = self._items.index(key)
        except ValueError:
            raise ValueError(f"{key!r} is not in the heap") from None
        last = self._items.pop()
        if index == len(self._items):
            return
        self._items[index] = last
        if index > 0 and last < self._items[(index - 1) // 2]:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)