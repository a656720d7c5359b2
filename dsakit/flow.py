"""Maximum flow by Ford-Fulkerson with breadth-first augmenting paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class FlowResult:
    """The maximum flow value and the augmenting paths used to reach it."""

    max_flow: int
    paths: list[list[int]] = field(default_factory=list)


def _augmenting_path(
    residual: list[list[int]], source: int, sink: int
) -> tuple[int, list[int]]:
    n = len(residual)
    parent = [-1] * n
    parent[source] = -2
    queue: deque[tuple[int, float]] = deque([(source, math.inf)])
    while queue:
        src, capacity = queue.popleft()
        for dest, available in enumerate(residual[src]):
            if dest != src and parent[dest] == -1 and available != 0:
                parent[dest] = src
                bottleneck = min(capacity, available)
                if dest == sink:
                    return int(bottleneck), parent
                queue.append((dest, bottleneck))
    return 0, parent


def ford_fulkerson(
    capacity: Sequence[Sequence[int]], source: int, sink: int
) -> FlowResult:
    """Return the maximum flow from ``source`` to ``sink`` in a capacity matrix."""
    residual = [list(row) for row in capacity]
    n = len(residual)
    if any(len(row) != n for row in residual):
        raise ValueError("capacity matrix must be square")
    if any(value < 0 for row in residual for value in row):
        raise ValueError("capacities must be non-negative")
    for vertex in (source, sink):
        if not 0 <= vertex < n:
            raise ValueError(f"vertex {vertex} is out of range")

    result = FlowResult(0)
    while True:
        bottleneck, parent = _augmenting_path(residual, source, sink)
        if not bottleneck:
            return result
        result.max_flow += bottleneck
        path = [sink]
        u = sink
        while u != source:
            v = parent[u]
            residual[u][v] += bottleneck
            residual[v][u] -= bottleneck
            u = v
            path.append(u)
        path.reverse()
        result.paths.append(path)