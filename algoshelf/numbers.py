"""Number bases, bit manipulation and related helpers."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1

__all__ = [
    "digit_value",
    "to_decimal",
    "digit_char",
    "from_decimal",
    "get_bit",
    "set_bit",
    "clear_bit",
    "update_bit",
    "count_ones",
    "is_power_of_two",
    "subsets",
    "best_shift",
]


def digit_value(char: str) -> int:
    """Value of a single digit: ``0``-``9`` then ``A`` = 10, ``B`` = 11, ..."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    return ord(char) - ord("A") + 10


def to_decimal(text: str, base: int) -> int:
    """Convert ``text`` written in ``base`` to an integer.

    Raises ``ValueError`` if a digit is not valid in that base.
    """
    number = 0
    power = 1
    for char in reversed(text):
        value = digit_value(char)
        if value >= base:
            raise ValueError("Invalid Number")
        number += value * power
        power *= base
    return number


def digit_char(value: int) -> str:
    """Digit character for ``value``: ``0``-``9`` then ``A``, ``B``, ..."""
    if 0 <= value <= 9:
        return chr(value + ord("0"))
    return chr(value - 10 + ord("A"))


def from_decimal(number: int, base: int) -> str:
    """Write a positive ``number`` in ``base``; zero and negatives give ``""``."""
    digits = []
    while number > 0:
        number, rest = divmod(number, base)
        digits.append(digit_char(rest))
    return "".join(reversed(digits))


def get_bit(n: int, pos: int) -> int:
    """Return 1 if bit ``pos`` of ``n`` is set, else 0."""
    return int(n & (1 << pos) != 0)


def set_bit(n: int, pos: int) -> int:
    return n | (1 << pos)


def clear_bit(n: int, pos: int) -> int:
    return n & ~(1 << pos)


def update_bit(n: int, pos: int) -> int:
    """Write a zero into bit ``pos`` of ``n``."""
    return clear_bit(n, pos) | (0 << pos)


def count_ones(n: int) -> int:
    """Number of set bits; negatives are counted as 32-bit two's complement."""
    if n < 0:
        n &= _INT_MASK
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def is_power_of_two(n: int) -> bool:
    return bool(n) and not (n & (n - 1))


def subsets(items: Sequence[T]) -> list[list[T]]:
    """Every subset of ``items``, in bitmask order (bit j selects ``items[j]``)."""
    return [
        [item for j, item in enumerate(items) if mask & (1 << j)]
        for mask in range(1 << len(items))
    ]


def best_shift(bits: str) -> int:
    """Shift Y that minimises ``X ^ (X >> Y)`` for the binary string ``bits``.

    It is one for a leading ``1`` plus the run of zeros that follows the
    first character.
    """
    if not bits:
        return 0
    rest = bits[1:]
    zeros = len(rest) - len(rest.lstrip("0"))
    return (1 if bits[0] == "1" else 0) + zeros