"""Array algorithms: maximum subarray, order statistics, subset sums, searching."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

__all__ = [
    "max_subarray_sum",
    "kth_largest_and_smallest",
    "subset_sums",
    "binary_search",
    "linear_search",
]


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not values:
        raise ValueError("max_subarray_sum() needs at least one value")
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def kth_largest_and_smallest(values: Sequence[int], k: int) -> tuple[int, int]:
    """Return ``(kth largest, kth smallest)`` of ``values``; ``k`` counts from 1."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    ordered = sorted(values)
    return ordered[len(ordered) - k], ordered[k - 1]


def subset_sums(values: Sequence[int]) -> list[int]:
    """Sums of all ``2**n`` subsets, in ascending order."""
    return sorted(
        sum(combo)
        for size in range(len(values) + 1)
        for combo in combinations(values, size)
    )


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Index of ``key`` in ascending ``values``, or None if it is absent."""
    if not values or key < values[0] or key > values[-1]:
        return None
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return None


def linear_search(values: Sequence[int], key: int) -> int | None:
    """Index of the first occurrence of ``key``, or None if it is absent."""
    return next((i for i, value in enumerate(values) if value == key), None)