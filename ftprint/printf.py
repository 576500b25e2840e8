"""A small formatted-output routine with the conversions c s p d i u x X %.

A conversion is a ``%`` followed by exactly one letter; there are no flags,
widths or precisions. Any other character after ``%`` is an error.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from ftprint.conversion import itoa

__all__ = [
    "FormatError",
    "is_format",
    "format_decimal",
    "format_unsigned",
    "format_hex",
    "format_pointer",
    "format_string",
    "sprintf",
    "printf",
]

NUL = "\0"
_CONVERSIONS = frozenset("cspdiuxX%")
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a '%' that is not followed by a known conversion."""


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _digits(value: int, alphabet: str) -> str:
    base = len(alphabet)
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(alphabet[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def is_format(c: str) -> bool:
    """True when c is a conversion letter understood after '%'."""
    return isinstance(c, str) and len(c) == 1 and c in _CONVERSIONS


def format_decimal(n: int) -> str:
    """Signed decimal of n taken as a 32-bit int."""
    return itoa(_to_int32(_integer(n)))


def format_unsigned(n: int) -> str:
    """Decimal of n taken as a 32-bit unsigned int."""
    return _digits(_integer(n) & _UINT_MASK, "0123456789")


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal of n taken as a 32-bit unsigned int, without prefix."""
    return _digits(_integer(n) & _UINT_MASK, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def format_pointer(address: Optional[int]) -> str:
    """'0x' and lower-case hex of a 64-bit address; a null address is '(nil)'."""
    if address is None:
        return "(nil)"
    value = _integer(address) & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _digits(value, _LOWER_DIGITS)


def format_string(value: Optional[str]) -> str:
    """value up to its first NUL; None is '(null)'."""
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value.split(NUL, 1)[0]


def _format_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    if not isinstance(fmt, str):
        raise TypeError(f"expected str, got {type(fmt).__name__}")
    text = fmt.split(NUL, 1)[0]
    values = iter(args)

    def take(conversion: str) -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None

    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch != "%":
            yield ch
            pos += 1
            continue
        conversion = text[pos + 1] if pos + 1 < len(text) else ""
        if not is_format(conversion):
            raise FormatError(f"unknown conversion at index {pos}: {text[pos:pos + 2]!r}")
        if conversion == "%":
            yield "%"
        elif conversion == "c":
            yield _format_char(take(conversion))
        elif conversion == "s":
            yield format_string(take(conversion))
        elif conversion in "di":
            yield format_decimal(take(conversion))
        elif conversion == "u":
            yield format_unsigned(take(conversion))
        elif conversion == "x":
            yield format_hex(take(conversion))
        elif conversion == "X":
            yield format_hex(take(conversion), upper=True)
        else:
            yield format_pointer(take(conversion))
        pos += 2


def sprintf(fmt: str, *args: Any) -> str:
    """The text fmt produces with args substituted for its conversions."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)