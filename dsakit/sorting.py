"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent items that are out of order."""
    result = list(items)
    n = len(result)
    for passes in range(1, n):
        for i in range(n - passes):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by swapping each position with any smaller item after it."""
    result = list(items)
    n = len(result)
    for i in range(n):
        for j in range(i + 1, n):
            if result[j] < result[i]:
                result[i], result[j] = result[j], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _hoare_partition(a: list[Any], low: int, high: int) -> int:
    pivot = a[low]
    left, right = low, high
    while left < right:
        while a[left] <= pivot and left < high:
            left += 1
        while right > low and a[right] > pivot:
            right -= 1
        if left < right:
            a[left], a[right] = a[right], a[left]
    a[low], a[right] = a[right], a[low]
    return right


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort taking the first item of each range as pivot."""
    result = list(items)
    ranges = [(0, len(result) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            p = _hoare_partition(result, low, high)
            ranges.append((low, p - 1))
            ranges.append((p + 1, high))
    return result


def dutch_flag_sort(items: Iterable[int]) -> list[int]:
    """Three-way partition in one pass: zeros, then ones, then everything else."""
    result = list(items)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result