"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

import sys
from typing import Optional

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc", "SIZE_MAX"]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest; return dest."""
    if dest is src:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes within buf from offset src to offset dest, overlap allowed."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of c in data[:n], or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Difference of the first differing bytes in the first n, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if SIZE_MAX // nmemb < size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)