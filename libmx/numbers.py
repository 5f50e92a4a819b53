"""Number helpers: hexadecimal conversion, decimal formatting, powers and roots."""

from __future__ import annotations

import math
import string

_ULONG_MASK = (1 << 64) - 1
_HEX_DIGITS = frozenset(string.hexdigits)

__all__ = ["exact_sqrt", "hex_to_nbr", "itoa", "nbr_to_hex", "nbrlen", "power"]


def hex_to_nbr(hex_str: str) -> int:
    """Parse an unprefixed hexadecimal string as a 64-bit unsigned number.

    An empty string gives 0; any non-hex character raises ValueError.
    """
    bad = [ch for ch in hex_str if ch not in _HEX_DIGITS]
    if bad:
        raise ValueError(f"invalid hexadecimal digit {bad[0]!r} in {hex_str!r}")
    if not hex_str:
        return 0
    return int(hex_str, 16) & _ULONG_MASK


def nbr_to_hex(nbr: int) -> str:
    """Format ``nbr`` as a 64-bit unsigned number in lowercase hexadecimal."""
    return format(nbr & _ULONG_MASK, "x")


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def nbrlen(nbr: int) -> int:
    """Return how many characters ``nbr`` takes in decimal, sign included."""
    return len(itoa(nbr))


def power(n: float, exponent: int) -> float:
    """Raise ``n`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1.0
    for _ in range(exponent):
        result *= n
    return result


def exact_sqrt(x: int) -> int:
    """Return the integer square root of ``x`` if ``x`` is a perfect square, else 0."""
    if x <= 0:
        return 0
    root = math.isqrt(x)
    return root if root * root == x else 0