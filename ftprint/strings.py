"""Searching, comparing and bounded copying of NUL-terminated text.

Strings are ordinary ``str`` values. A ``"\\0"`` inside a string ends it,
so everything after the first NUL is ignored. Positions are returned as
indexes, and ``None`` stands for "not found".
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
]

NUL = "\0"


def _text(s: str) -> str:
    """The part of s before its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s.split(NUL, 1)[0]


def _char(c: Union[int, str]) -> str:
    """A character from a one-character str or from the low byte of an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_text(s))


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first c in s; searching for NUL finds the terminator."""
    text = _text(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last c in s; searching for NUL finds the terminator."""
    text = _text(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch, or 0."""
    _check_size(n)
    pairs = zip_longest(_text(s1), _text(s2), fillvalue=NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first little lying wholly within the first length characters of big."""
    _check_size(length)
    haystack = _text(big)
    needle = _text(little)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, NUL included.

    Returns the copied text, truncated to size - 1 characters, and the full
    length of src, which tells whether truncation happened.
    """
    _check_size(size)
    text = _text(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, NUL included.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dst, dst is returned unchanged and the
    length reported is size plus the length of src.
    """
    _check_size(size)
    head = _text(dst)
    tail = _text(src)
    if size == 0:
        return head, len(tail)
    if size <= len(head):
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)