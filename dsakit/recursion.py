"""Divide-and-conquer routines: inversion count, Lomuto quick sort, Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) - 1) // 2 + 1
    left, x = _sort_and_count(items[:mid])
    right, y = _sort_and_count(items[mid:])
    merged = []
    cross = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            cross += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, x + y + cross


def inversion_count(items: Iterable[Any]) -> int:
    """Count the pairs ``i < j`` with ``items[i] > items[j]``."""
    _, count = _sort_and_count(list(items))
    return count


def _lomuto_partition(a: list[Any], s: int, e: int) -> int:
    pivot = a[e]
    i = s - 1
    for j in range(s, e):
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]
    a[i + 1], a[e] = a[e], a[i + 1]
    return i + 1


def quick_sort_lomuto(items: Iterable[Any]) -> list[Any]:
    """Quick sort taking the last item of each range as pivot; returns a new list."""
    result = list(items)
    ranges = [(0, len(result) - 1)]
    while ranges:
        s, e = ranges.pop()
        if s < e:
            p = _lomuto_partition(result, s, e)
            ranges.append((s, p - 1))
            ranges.append((p + 1, e))
    return result


def hanoi_moves(
    n: int, src: str = "A", helper: str = "B", dest: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that carry ``n`` disks to ``dest``."""
    if n < 0:
        raise ValueError("the number of disks must be non-negative")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, src, dest, helper)
    yield (n, src, dest)
    yield from hanoi_moves(n - 1, helper, src, dest)