"""Disjoint set union with path compression and union by rank."""

from __future__ import annotations

from collections.abc import Iterable


class UnionFind:
    """A collection of disjoint sets over the elements ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of elements must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._num_sets = n

    def find_set(self, i: int) -> int:
        """Return the representative of the set containing ``i``."""
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def is_same_set(self, i: int, j: int) -> bool:
        """Return whether ``i`` and ``j`` belong to the same set."""
        return self.find_set(i) == self.find_set(j)

    def size_of_set(self, i: int) -> int:
        """Return the size of the set containing ``i``."""
        return self._size[self.find_set(i)]

    def union_set(self, i: int, j: int) -> None:
        """Merge the sets containing ``i`` and ``j``."""
        x = self.find_set(i)
        y = self.find_set(j)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._num_sets -= 1

    def __len__(self) -> int:
        """Return the number of disjoint sets currently maintained."""
        return self._num_sets


def run_commands(size: int, commands: Iterable[tuple[str, int, int]]) -> list[str]:
    """Apply ``union`` commands and answer every other command as a query.

    Elements run from 0 to ``size``. Each query yields ``"YES"`` when both
    elements share a set and ``"NO"`` otherwise.
    """
    uf = UnionFind(size + 1)
    answers = []
    for op, x, y in commands:
        if op == "union":
            uf.union_set(x, y)
        else:
            answers.append("YES" if uf.is_same_set(x, y) else "NO")
    return answers