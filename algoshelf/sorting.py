"""Classic comparison sorts and a counting sort for characters."""

from __future__ import annotations

from typing import Iterable

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "wave_sort",
    "counting_sort",
]

_CHAR_RANGE = 256


def bubble_sort(values: Iterable) -> list:
    """Return a sorted copy using bubble sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        for j in range(size - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable) -> list:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        element = items[i]
        j = i - 1
        while j >= 0 and items[j] > element:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = element
    return items


def selection_sort(values: Iterable) -> list:
    """Return a sorted copy using selection sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return a sorted copy using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable) -> list:
    """Return a sorted copy using quicksort with the last element as pivot."""
    items = list(values)

    def partition(low: int, high: int) -> int:
        pivot = items[high]
        i = low - 1
        for j in range(low, high):
            if items[j] <= pivot:
                i += 1
                items[i], items[j] = items[j], items[i]
        items[i + 1], items[high] = items[high], items[i + 1]
        return i + 1

    def sort(low: int, high: int) -> None:
        if low < high:
            split = partition(low, high)
            sort(low, split - 1)
            sort(split + 1, high)

    sort(0, len(items) - 1)
    return items


def wave_sort(values: Iterable) -> list:
    """Arrange values so that a[0] >= a[1] <= a[2] >= a[3] ..."""
    items = sorted(values)
    for i in range(0, len(items) - 1, 2):
        items[i], items[i + 1] = items[i + 1], items[i]
    return items


def counting_sort(text: str) -> str:
    """Sort the characters of ``text`` by code point with a counting sort.

    Only characters with code points below 256 are accepted.
    """
    counts = [0] * _CHAR_RANGE
    for ch in text:
        code = ord(ch)
        if code >= _CHAR_RANGE:
            raise ValueError(f"character {ch!r} is outside the supported range")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts) if count)