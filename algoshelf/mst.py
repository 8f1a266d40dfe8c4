"""Minimum spanning trees: Kruskal over an edge list, Prim over a cost matrix."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

__all__ = ["kruskal", "prim_matrix"]


def _find(u: int, parent: list[int]) -> int:
    while parent[u] != u:
        u = parent[u]
    return u


def kruskal(
    n: int, edges: Iterable[tuple[int, int, float]]
) -> tuple[float, list[tuple[int, int]]]:
    """Minimum spanning forest of vertices ``0 .. n-1``.

    ``edges`` holds ``(u, v, weight)`` triples. Returns the total cost and
    the chosen edges in the order they were taken.
    """
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
    parent = list(range(n))
    rank = [0] * n
    cost: float = 0
    tree: list[tuple[int, int]] = []
    for u, v, weight in sorted(edge_list, key=lambda edge: edge[2]):
        root_u = _find(u, parent)
        root_v = _find(v, parent)
        if root_u == root_v:
            continue
        cost += weight
        tree.append((u, v))
        if rank[root_u] > rank[root_v]:
            parent[root_v] = root_u
        elif rank[root_u] < rank[root_v]:
            parent[root_u] = root_v
        else:
            parent[root_v] = root_u
            rank[root_u] += 1
    return cost, tree


def prim_matrix(cost: Sequence[Sequence[float]]) -> list[tuple[int, int]]:
    """Edges of a minimum spanning tree of a symmetric cost matrix.

    ``math.inf`` marks a missing edge. Raises ``ValueError`` if the matrix is
    not square or the graph is disconnected.
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("the cost matrix must be square")
    if n < 2:
        return []

    best = math.inf
    u = v = -1
    for i in range(n):
        for j in range(i, n):
            if cost[i][j] < best:
                best, u, v = cost[i][j], i, j
    if u < 0:
        raise ValueError("graph is disconnected")

    tree = [(u, v)]
    near: list[Optional[int]] = [
        None if i in (u, v) else (u if cost[i][u] < cost[i][v] else v)
        for i in range(n)
    ]
    for _ in range(n - 2):
        best = math.inf
        k = -1
        for j, attach in enumerate(near):
            if attach is not None and cost[j][attach] < best:
                best, k = cost[j][attach], j
        if k < 0:
            raise ValueError("graph is disconnected")
        attach_k = near[k]
        assert attach_k is not None
        tree.append((k, attach_k))
        near[k] = None
        for j, attach in enumerate(near):
            if attach is not None and cost[j][k] < cost[j][attach]:
                near[j] = k
    return tree