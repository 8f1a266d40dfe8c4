"""Undirected graphs stored as adjacency lists over vertices ``0 .. n-1``."""

from __future__ import annotations

from collections import deque
from typing import Iterable

__all__ = ["AdjacencyList", "build_undirected"]


class AdjacencyList:
    """Undirected graph on ``vertices`` vertices numbered from 0."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertices must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adj)

    def __getitem__(self, vertex: int) -> tuple[int, ...]:
        return tuple(self._adj[vertex])

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        for vertex in (u, v):
            if not 0 <= vertex < len(self._adj):
                raise ValueError(f"vertex {vertex} is not in 0..{len(self._adj) - 1}")
        self._adj[u].append(v)
        self._adj[v].append(u)

    def format(self) -> str:
        """One line per vertex: ``i->`` followed by its neighbours."""
        return "".join(
            f"{i}->" + "".join(f"{u} " for u in neighbours) + "\n"
            for i, neighbours in enumerate(self._adj)
        )

    def dfs_order(self) -> list[int]:
        """Depth-first preorder over every component, lowest vertex first."""
        visited: set[int] = set()
        order: list[int] = []
        for root in range(len(self._adj)):
            if root in visited:
                continue
            visited.add(root)
            order.append(root)
            stack = [iter(self._adj[root])]
            while stack:
                for nxt in stack[-1]:
                    if nxt not in visited:
                        visited.add(nxt)
                        order.append(nxt)
                        stack.append(iter(self._adj[nxt]))
                        break
                else:
                    stack.pop()
        return order

    def bfs_order(self) -> list[int]:
        """Breadth-first order over every component, lowest vertex first."""
        visited: set[int] = set()
        order: list[int] = []
        for root in range(len(self._adj)):
            if root in visited:
                continue
            visited.add(root)
            queue = deque([root])
            while queue:
                node = queue.popleft()
                order.append(node)
                for nxt in self._adj[node]:
                    if nxt not in visited:
                        visited.add(nxt)
                        queue.append(nxt)
        return order

    def has_cycle(self) -> bool:
        """True if some component holds a cycle."""
        visited: set[int] = set()
        for root in range(len(self._adj)):
            if root in visited:
                continue
            visited.add(root)
            stack = [(root, -1, iter(self._adj[root]))]
            while stack:
                node, parent, neighbours = stack[-1]
                for nxt in neighbours:
                    if nxt not in visited:
                        visited.add(nxt)
                        stack.append((nxt, node, iter(self._adj[nxt])))
                        break
                    if nxt != parent:
                        return True
                else:
                    stack.pop()
        return False


def build_undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Neighbour lists for vertices ``0 .. n``, each edge stored both ways."""
    graph = AdjacencyList(n + 1)
    for u, v in edges:
        graph.add_edge(u, v)
    return [list(graph[i]) for i in range(n + 1)]