"""Linear and binary search over sequences."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first item equal to ``key``, or ``None``."""
    return next((index for index, item in enumerate(items) if item == key), None)


def lower_bound(items: Sequence[Any], key: Any) -> int:
    """Return the first index of a sorted sequence whose item is not less than ``key``."""
    return bisect.bisect_left(items, key)


def upper_bound(items: Sequence[Any], key: Any) -> int:
    """Return the first index of a sorted sequence whose item is greater than ``key``."""
    return bisect.bisect_right(items, key)


def binary_search(items: Sequence[Any], key: Any) -> bool:
    """Return whether ``key`` occurs in the sorted sequence ``items``."""
    index = lower_bound(items, key)
    return index < len(items) and items[index] == key


def count_occurrences(items: Sequence[Any], key: Any) -> int:
    """Return how often ``key`` occurs in the sorted sequence ``items``."""
    return upper_bound(items, key) - lower_bound(items, key)