"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Sequence
from itertools import count

from dsakit.graph import Graph


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int = 0
) -> list[float]:
    """Return the distance from ``source`` to every vertex over directed edges.

    Unreachable vertices get ``math.inf``. Raises ``NegativeCycleError`` when
    a negative cycle can be reached from ``source``.
    """
    edge_list = list(edges)
    for u, v, _ in edge_list:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} is out of range")

    distance: list[float] = [math.inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        updated = False
        for u, v, weight in edge_list:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                updated = True
        if not updated:
            break

    for u, v, weight in edge_list:
        if distance[u] != math.inf and distance[u] + weight < distance[v]:
            raise NegativeCycleError("graph has a negative weight cycle")
    return distance


def dijkstra(graph: Graph, source: Hashable) -> dict[Hashable, float]:
    """Return the distance from ``source`` to every vertex of ``graph``.

    Edge weights must be non-negative; unreachable vertices get ``math.inf``.
    """
    if source not in graph:
        raise ValueError(f"unknown source vertex {source!r}")
    for u in graph:
        if any(weight < 0 for _, weight in graph.neighbours(u)):
            raise ValueError("edge weights must be non-negative")

    dist: dict[Hashable, float] = {vertex: math.inf for vertex in graph}
    dist[source] = 0
    tie = count()
    heap = [(0, next(tie), source)]
    while heap:
        d, _, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in graph.neighbours(u):
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, next(tie), v))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances; use ``math.inf`` for missing edges."""
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for row_i in dist:
            via = row_i[k]
            for j in range(n):
                if row_i[j] > via + row_k[j]:
                    row_i[j] = via + row_k[j]
    return dist