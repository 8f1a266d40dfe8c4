"""Disjoint set union with path compression and union by size."""

from __future__ import annotations

__all__ = ["DisjointSetUnion"]


class DisjointSetUnion:
    """Partition of ``0 .. n-1`` that tracks the vertices and edges of each component."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._edges = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is not in 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Representative of the component holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Record an edge between ``x`` and ``y``.

        Returns True if two components were merged, False if the edge fell
        inside one component (it is still counted).
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            self._edges[root_x] += 1
            return False
        if self._size[root_x] > self._size[root_y]:
            big, small = root_x, root_y
        else:
            big, small = root_y, root_x
        self._parent[small] = big
        self._size[big] += self._size[small]
        self._edges[big] += self._edges[small] + 1
        return True

    def component_size(self, x: int) -> int:
        """Number of vertices in the component holding ``x``."""
        return self._size[self.find(x)]

    def component_edges(self, x: int) -> int:
        """Number of edges recorded in the component holding ``x``."""
        return self._edges[self.find(x)]