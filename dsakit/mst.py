"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from dsakit.dsu import UnionFind


class Edge(NamedTuple):
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: float


def _edges(vertex_count: int, edges: Iterable[Sequence[float]]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    result = []
    for src, dest, weight in edges:
        for vertex in (src, dest):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        result.append(Edge(src, dest, weight))
    return result


def kruskal(vertex_count: int, edges: Iterable[Sequence[float]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree in the order they were chosen.

    ``edges`` holds ``(src, dest, weight)`` triples. Each returned edge lists
    its smaller endpoint first. Raises ``ValueError`` if the graph is not
    connected.
    """
    ordered = sorted(_edges(vertex_count, edges), key=lambda edge: edge.weight)
    needed = max(vertex_count - 1, 0)
    sets = UnionFind(vertex_count)
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) == needed:
            break
        if not sets.is_same_set(edge.src, edge.dest):
            sets.union_set(edge.src, edge.dest)
            low, high = sorted((edge.src, edge.dest))
            tree.append(Edge(low, high, edge.weight))
    if len(tree) != needed:
        raise ValueError("graph is not connected")
    return tree


def kruskal_weight(vertex_count: int, edges: Iterable[Sequence[float]]) -> float:
    """Return the total weight of a minimum spanning forest."""
    ordered = sorted(
        _edges(vertex_count, edges), key=lambda e: (e.weight, e.src, e.dest)
    )
    sets = UnionFind(vertex_count)
    total: float = 0
    for edge in ordered:
        if not sets.is_same_set(edge.src, edge.dest):
            sets.union_set(edge.src, edge.dest)
            total += edge.weight
    return total


def prim(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Return a minimum spanning tree of an adjacency matrix rooted at vertex 0.

    A zero entry means there is no edge. The result holds one edge per
    vertex ``1 .. n-1`` as ``Edge(parent, vertex, weight)``, in vertex order.
    Raises ``ValueError`` if the graph is not connected.
    """
    graph = [list(row) for row in matrix]
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    if n == 0:
        return []

    distance = [math.inf] * n
    parent = [-1] * n
    in_tree = [False] * n
    distance[0] = 0
    for _ in range(n):
        u = min(
            (v for v in range(n) if not in_tree[v]),
            key=lambda v: distance[v],
        )
        if distance[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < distance[v]:
                distance[v] = weight
                parent[v] = u
    return [Edge(parent[v], v, graph[v][parent[v]]) for v in range(1, n)]


def prim_weight(vertex_count: int, edges: Iterable[Sequence[float]]) -> float:
    """Return the weight of a minimum spanning tree of the component holding vertex 0."""
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for src, dest, weight in _edges(vertex_count, edges):
        adjacency[src].append((dest, weight))
        adjacency[dest].append((src, weight))
    if vertex_count == 0:
        return 0

    visited = [False] * vertex_count
    total: float = 0
    queue: list[tuple[float, int]] = [(0, 0)]
    while queue:
        weight, node = heapq.heappop(queue)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for nbr, w in adjacency[node]:
            if not visited[nbr]:
                heapq.heappush(queue, (w, nbr))
    return total