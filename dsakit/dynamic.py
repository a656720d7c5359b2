"""Dynamic programming and exhaustive search: 0/1 knapsack and a naive TSP."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise, permutations


def knapsack_01(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the largest total profit of items whose weights fit ``capacity``.

    Returns 0 when the capacity is not positive, there are no items, or the
    two sequences differ in length.
    """
    profits = list(profits)
    weights = list(weights)
    if capacity <= 0 or not profits or len(weights) != len(profits):
        return 0
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")

    row = [profits[0] if weights[0] <= c else 0 for c in range(capacity + 1)]
    for profit, weight in zip(profits[1:], weights[1:]):
        row = [0] + [
            max(profit + row[c - weight] if weight <= c else 0, row[c])
            for c in range(1, capacity + 1)
        ]
    return row[capacity]


def tsp_naive(graph: Sequence[Sequence[int]], source: int = 0) -> int:
    """Return the cheapest tour from ``source`` through every vertex and back.

    Every ordering of the other vertices is tried.
    """
    matrix = [list(row) for row in graph]
    n = len(matrix)
    if n == 0:
        raise ValueError("graph must have at least one vertex")
    if any(len(row) != n for row in matrix):
        raise ValueError("graph matrix must be square")
    if not 0 <= source < n:
        raise ValueError(f"source vertex {source} is out of range")

    others = [v for v in range(n) if v != source]
    return min(
        sum(matrix[a][b] for a, b in pairwise((source, *order, source)))
        for order in permutations(others)
    )