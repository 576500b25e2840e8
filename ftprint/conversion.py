"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "INT_MIN", "INT_MAX", "LONG_MIN", "LONG_MAX"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_SPACE = frozenset("\f\n\r\t\v ")
_DIGITS = frozenset("0123456789")


def _to_int32(value: int) -> int:
    """Wrap value into the 32-bit signed range, as a narrowing cast does."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text that overflows a 64-bit value saturates at that limit,
    and the result is then narrowed to 32 bits.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    pos = 0
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    negative = pos < len(text) and text[pos] == "-"
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    magnitude = 0
    while pos < len(text) and text[pos] in _DIGITS:
        magnitude = magnitude * 10 + int(text[pos])
        if not negative and magnitude > LONG_MAX:
            return _to_int32(LONG_MAX)
        if negative and magnitude > -LONG_MIN:
            return _to_int32(LONG_MIN)
        pos += 1
    return _to_int32(-magnitude if negative else magnitude)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in 32 bits")
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits