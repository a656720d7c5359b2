"""An adjacency-list graph with weighted edges and BFS/DFS traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from typing import Any


class Graph:
    """A graph keyed by hashable vertices, each holding ``(neighbour, weight)`` pairs.

    Vertices are kept in the order they first appear in an edge.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_edge(
        self, u: Hashable, v: Hashable, weight: Any = 1, bidirectional: bool = True
    ) -> None:
        """Add an edge from ``u`` to ``v``, and back again when ``bidirectional``."""
        self._adjacency.setdefault(u, []).append((v, weight))
        self._adjacency.setdefault(v, [])
        if bidirectional:
            self._adjacency[v].append((u, weight))

    def neighbours(self, u: Hashable) -> list[tuple[Hashable, Any]]:
        """Return the ``(neighbour, weight)`` pairs of ``u`` in insertion order."""
        try:
            return list(self._adjacency[u])
        except KeyError:
            raise KeyError(f"unknown vertex {u!r}") from None

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._adjacency))

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, u: object) -> bool:
        return u in self._adjacency

    def _require(self, u: Hashable) -> None:
        if u not in self._adjacency:
            raise KeyError(f"unknown vertex {u!r}")

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._require(source)
        order = []
        visited = {source}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr, _ in self._adjacency[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``source`` in depth-first preorder."""
        self._require(source)
        order = [source]
        visited = {source}
        stack = [iter(self._adjacency[source])]
        while stack:
            for nbr, _ in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append(iter(self._adjacency[nbr]))
                    break
            else:
                stack.pop()
        return order

    def format_adjacency(self) -> str:
        """Render one line per vertex as ``u->(v,w)(v,w)...``."""
        return "\n".join(
            f"{u}->" + "".join(f"({v},{w})" for v, w in edges)
            for u, edges in self._adjacency.items()
        )