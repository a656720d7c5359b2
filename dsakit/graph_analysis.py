"""Articulation points (Tarjan) and greedy graph colouring."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import count


def _check_vertex(v: int, vertex_count: int) -> None:
    if not 0 <= v < vertex_count:
        raise ValueError(f"vertex {v} is out of range")


def articulation_points(
    adjacency: Mapping[int, Iterable[int]], vertex_count: int
) -> list[int]:
    """Return, in ascending order, the vertices whose removal disconnects the graph.

    ``adjacency`` maps a vertex to its neighbours; vertices run from 0 to
    ``vertex_count - 1`` and may be missing from the mapping.
    """
    neighbours = {u: list(vs) for u, vs in adjacency.items()}
    for u, vs in neighbours.items():
        _check_vertex(u, vertex_count)
        for v in vs:
            _check_vertex(v, vertex_count)

    disc = [-1] * vertex_count
    low = [-1] * vertex_count
    parent = [-1] * vertex_count
    is_cut = [False] * vertex_count
    timer = 0

    def visit(u: int) -> None:
        nonlocal timer
        disc[u] = low[u] = timer
        timer += 1
        children = 0
        for v in neighbours.get(u, ()):
            if disc[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    is_cut[u] = True
                if parent[u] != -1 and low[v] >= disc[u]:
                    is_cut[u] = True
            elif v != parent[u]:
                low[u] = min(low[u], disc[v])

    for vertex in range(vertex_count):
        if disc[vertex] == -1:
            visit(vertex)
    return [vertex for vertex, flag in enumerate(is_cut) if flag]


def greedy_coloring(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices in index order with the smallest colour no neighbour has.

    Returns the number of colours used and the colour of every vertex.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    graph: list[list[int]] = [[] for _ in range(vertex_count)]
    for x, y in edges:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
        graph[x].append(y)
        graph[y].append(x)

    colours = [-1] * vertex_count
    if vertex_count:
        colours[0] = 0
    for vertex in range(1, vertex_count):
        taken = {colours[x] for x in graph[vertex] if colours[x] != -1}
        colours[vertex] = next(c for c in count() if c not in taken)
    used = max(colours) + 1 if colours else 0
    return used, colours