"""String algorithms: scramble detection, wildcard matching and stack reversal."""

from __future__ import annotations

from functools import lru_cache
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["BoundedStack", "is_scramble", "is_match", "reverse_with_stack"]


class BoundedStack(Generic[T]):
    """A LIFO stack holding at most ``capacity`` items.

    Pushing onto a full stack drops the item; popping an empty stack raises
    ``IndexError``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        """Push ``item`` unless the stack is already full."""
        if self.is_full():
            return
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items


def is_scramble(s1: str, s2: str) -> bool:
    """Return True if ``s2`` can be obtained from ``s1`` by recursive splits and swaps."""

    @lru_cache(maxsize=None)
    def solve(a: str, b: str) -> bool:
        if a == b:
            return True
        if len(a) != len(b):
            return False
        n = len(a)
        return any(
            (solve(a[:i], b[n - i:]) and solve(a[i:], b[: n - i]))
            or (solve(a[:i], b[:i]) and solve(a[i:], b[i:]))
            for i in range(1, n)
        )

    return solve(s1, s2)


def is_match(s: str, p: str) -> bool:
    """Match ``s`` against wildcard pattern ``p`` (``?`` one char, ``*`` any run)."""
    n = len(p)
    prev = [True] + [False] * n
    for j, ch in enumerate(p, 1):
        prev[j] = prev[j - 1] and ch == "*"
    for c in s:
        row = [False] * (n + 1)
        for j, ch in enumerate(p, 1):
            if ch == "?" or ch == c:
                row[j] = prev[j - 1]
            elif ch == "*":
                row[j] = prev[j] or row[j - 1]
        prev = row
    return prev[n]


def reverse_with_stack(text: str) -> str:
    """Reverse ``text`` by pushing every character onto a stack and popping them."""
    stack: BoundedStack[str] = BoundedStack(len(text))
    for ch in text:
        stack.push(ch)
    return "".join(stack.pop() for _ in range(len(text)))