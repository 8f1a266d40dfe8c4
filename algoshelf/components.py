"""Connectivity: strongly connected components, mother vertices, bipartiteness."""

from __future__ import annotations

from collections import deque
from typing import Hashable, Iterable, Mapping, Optional, Sequence, Union

from algoshelf.dsu import DisjointSetUnion

__all__ = [
    "kosaraju_components",
    "mother_vertex",
    "count_connected_components",
    "is_bipartite",
]

Adjacency = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[Hashable]]]


def _as_dict(adjacency: Adjacency) -> dict:
    items = adjacency.items() if isinstance(adjacency, Mapping) else enumerate(adjacency)
    graph = {node: list(neighbours) for node, neighbours in items}
    for neighbours in list(graph.values()):
        for node in neighbours:
            graph.setdefault(node, [])
    return graph


def _reach(graph: dict, root: Hashable, visited: set, finished: list) -> None:
    visited.add(root)
    stack = [(root, iter(graph[root]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt not in visited:
                visited.add(nxt)
                stack.append((nxt, iter(graph[nxt])))
                break
        else:
            stack.pop()
            finished.append(node)


def _finishing_order(graph: dict) -> list:
    visited: set = set()
    finished: list = []
    for node in graph:
        if node not in visited:
            _reach(graph, node, visited, finished)
    return finished


def kosaraju_components(adjacency: Adjacency) -> list[list]:
    """Strongly connected components of a directed graph (Kosaraju).

    Each component lists its nodes in breadth-first order over the reversed
    graph.
    """
    graph = _as_dict(adjacency)
    order = _finishing_order(graph)
    reverse: dict = {node: [] for node in graph}
    for node, neighbours in graph.items():
        for nxt in neighbours:
            reverse[nxt].append(node)
    assigned: set = set()
    components: list[list] = []
    for root in reversed(order):
        if root in assigned:
            continue
        assigned.add(root)
        component = []
        queue = deque([root])
        while queue:
            node = queue.popleft()
            component.append(node)
            for nxt in reverse[node]:
                if nxt not in assigned:
                    assigned.add(nxt)
                    queue.append(nxt)
        components.append(component)
    return components


def mother_vertex(adjacency: Adjacency) -> Optional[Hashable]:
    """A node from which every node can be reached, or None if there is none."""
    graph = _as_dict(adjacency)
    if not graph:
        return None
    candidate = _finishing_order(graph)[-1]
    visited: set = set()
    _reach(graph, candidate, visited, [])
    return candidate if len(visited) == len(graph) else None


def count_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of components of the undirected graph on ``0 .. n-1``."""
    dsu = DisjointSetUnion(n)
    for u, v in edges:
        dsu.unite(u, v)
    return len({dsu.find(i) for i in range(n)})


def is_bipartite(adjacency: Adjacency, start: Hashable) -> bool:
    """True if the component holding ``start`` can be two-coloured."""
    graph = _as_dict(adjacency)
    graph.setdefault(start, [])
    colour = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if nxt not in colour:
                colour[nxt] = colour[node] ^ 1
                queue.append(nxt)
            elif colour[nxt] == colour[node]:
                return False
    return True