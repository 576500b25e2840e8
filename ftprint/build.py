"""Building new strings from existing ones.

Strings are ordinary ``str`` values. A ``"\\0"`` inside a string ends it,
so everything after the first NUL is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

__all__ = ["strdup", "substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]

NUL = "\0"

CharLike = Union[int, str]


def _text(s: str) -> str:
    """The part of s before its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s.split(NUL, 1)[0]


def _char(c: CharLike) -> str:
    """A character from a one-character str or from the low byte of an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strdup(s: str) -> str:
    """A copy of s up to its terminating NUL."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end of s, or a length of 0, gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    text = _text(s)
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return _text(s1) + _text(s2)


def strtrim(s: str, charset: str) -> str:
    """s with every character of charset removed from both ends."""
    return _text(s).strip(_text(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty runs of s separated by the character sep."""
    text = _text(s)
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], CharLike]) -> str:
    """A new string made of func(index, char) for every character of s.

    func may return a one-character str or an int, of which the low byte
    is taken.
    """
    return "".join(_char(func(index, ch)) for index, ch in enumerate(_text(s)))


def striteri(
    s: MutableSequence,
    func: Callable[[int, CharLike], Optional[CharLike]],
) -> MutableSequence:
    """Call func(index, item) on each item of s before the first NUL.

    s is a mutable sequence of characters (a list of one-character strings
    or a bytearray). When func returns something other than None, it
    replaces the item in place. Returns s.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence, not an immutable string")
    for index, item in enumerate(s):
        if item == NUL or item == 0:
            break
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement
    return s