"""Cycle detection in graphs given as adjacency lists."""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterable, Mapping, Sequence, Union

__all__ = ["has_cycle_colored", "has_cycle_from", "has_cycle_directed"]

Adjacency = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[Hashable]]]


class _State(Enum):
    UNVISITED = 0
    ACTIVE = 1
    DONE = 2


def _as_dict(adjacency: Adjacency) -> dict:
    items = adjacency.items() if isinstance(adjacency, Mapping) else enumerate(adjacency)
    graph = {node: list(neighbours) for node, neighbours in items}
    for neighbours in list(graph.values()):
        for node in neighbours:
            graph.setdefault(node, [])
    return graph


def has_cycle_colored(adjacency: Adjacency) -> bool:
    """Cycle test that never walks straight back to the node it came from.

    Meant for undirected graphs stored with both directions and no parallel
    edges.
    """
    graph = _as_dict(adjacency)
    state = {node: _State.UNVISITED for node in graph}
    for root in graph:
        if state[root] is not _State.UNVISITED:
            continue
        state[root] = _State.ACTIVE
        stack = [(root, None, iter(graph[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt == parent:
                    continue
                if state[nxt] is _State.ACTIVE:
                    return True
                if state[nxt] is _State.UNVISITED:
                    state[nxt] = _State.ACTIVE
                    stack.append((nxt, node, iter(graph[nxt])))
                    break
            else:
                state[node] = _State.DONE
                stack.pop()
    return False


def _directed_cycle(graph: dict, root: Hashable, state: dict) -> bool:
    state[root] = _State.ACTIVE
    stack = [(root, iter(graph[root]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if state[nxt] is _State.ACTIVE:
                return True
            if state[nxt] is _State.UNVISITED:
                state[nxt] = _State.ACTIVE
                stack.append((nxt, iter(graph[nxt])))
                break
        else:
            state[node] = _State.DONE
            stack.pop()
    return False


def has_cycle_from(adjacency: Adjacency, start: Hashable) -> bool:
    """True if a directed cycle can be reached from ``start``."""
    graph = _as_dict(adjacency)
    graph.setdefault(start, [])
    state = {node: _State.UNVISITED for node in graph}
    return _directed_cycle(graph, start, state)


def has_cycle_directed(adjacency: Adjacency) -> bool:
    """True if the directed graph holds any cycle."""
    graph = _as_dict(adjacency)
    state = {node: _State.UNVISITED for node in graph}
    return any(
        state[node] is _State.UNVISITED and _directed_cycle(graph, node, state)
        for node in graph
    )