"""All-pairs shortest paths over a dense matrix with a sentinel for 'no edge'."""

from __future__ import annotations

from typing import Sequence

__all__ = ["INF", "floyd_warshall_matrix", "format_distances"]

INF = 99999

_HEADER = (
    "The following matrix shows the shortest distances"
    " between every pair of vertices \n"
)


def floyd_warshall_matrix(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Shortest distances between all pairs; ``INF`` marks a missing edge.

    The input is left unchanged.
    """
    dist = [list(row) for row in graph]
    if any(len(row) != len(dist) for row in dist):
        raise ValueError("the distance matrix must be square")
    for k, through in enumerate(dist):
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j, rest in enumerate(through):
                if rest != INF and via + rest < row[j]:
                    row[j] = via + rest
    return dist


def format_distances(dist: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix as text, one row per line."""
    lines = [
        "".join(("INF" if d == INF else str(d)) + "\t " for d in row) + "\n"
        for row in dist
    ]
    return _HEADER + "".join(lines)