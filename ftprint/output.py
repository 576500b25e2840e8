"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftprint.conversion import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]

NUL = "\0"


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character; an int contributes its low byte."""
    _stream(stream).write(_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s up to its first NUL; None writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    _stream(stream).write(s.split(NUL, 1)[0])


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing at all."""
    if s is None:
        return
    put_str(s, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _stream(stream).write(itoa(n))