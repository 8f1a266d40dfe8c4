"""Flood fill over a 2-D grid of colours."""

from __future__ import annotations

from collections import deque
from typing import Sequence

__all__ = ["flood_fill"]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, new_color: int
) -> list[list[int]]:
    """Recolour the 4-connected region holding ``(row, col)``.

    Returns a new grid; ``image`` itself is not modified.
    """
    grid = [list(line) for line in image]
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise IndexError(f"pixel ({row}, {col}) is outside the image")
    old_color = grid[row][col]
    if old_color == new_color:
        return grid
    grid[row][col] = new_color
    queue = deque([(row, col)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < len(grid) and 0 <= ny < len(grid[nx]) and grid[nx][ny] == old_color:
                grid[nx][ny] = new_color
                queue.append((nx, ny))
    return grid