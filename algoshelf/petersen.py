"""Walks in the Petersen graph spelling a word over the letters A to E."""

from __future__ import annotations

from typing import Optional

__all__ = ["petersen_walk"]

_EDGES = frozenset(
    frozenset(pair)
    for pair in [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
        (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
        (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
    ]
)

_LETTERS = "ABCDE"


def _walk_from(letters: str, vertex: int) -> Optional[str]:
    path = [vertex]
    for letter in letters[1:]:
        outer = _LETTERS.index(letter)
        for candidate in (outer, outer + 5):
            if frozenset((vertex, candidate)) in _EDGES:
                vertex = candidate
                break
        else:
            return None
        path.append(vertex)
    return "".join(map(str, path))


def petersen_walk(letters: str) -> Optional[str]:
    """Vertex numbers of a walk whose labels spell ``letters``, or None.

    Vertices ``i`` and ``i + 5`` both carry letter ``"ABCDE"[i]``; the walk
    starts from the outer vertex when it can.
    """
    if not letters:
        raise ValueError("letters must not be empty")
    bad = sorted(set(letters) - set(_LETTERS))
    if bad:
        raise ValueError(f"letters outside A-E: {''.join(bad)}")
    first = _LETTERS.index(letters[0])
    return _walk_from(letters, first) or _walk_from(letters, first + 5)