"""Byte-buffer primitives: fill, allocate, copy, search and compare.

Buffers are ``bytearray`` (or writable ``memoryview``) objects for the
operations that write, and any bytes-like object for those that only read.
A length that reaches past the end of a buffer raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, TypeVar

_B = TypeVar("_B")


def _view(buf) -> memoryview:
    return memoryview(buf).cast("B")


def _checked(n: int, *buffers) -> list[memoryview]:
    """Return byte views of *buffers* after checking that *n* fits each."""
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    views = [_view(buf) for buf in buffers]
    for view in views:
        if n > len(view):
            raise IndexError(f"length {n} exceeds buffer of {len(view)} bytes")
    return views


def memset(buf: _B, c: int, n: int) -> _B:
    """Fill the first *n* bytes of *buf* with the low byte of *c*; return *buf*."""
    (view,) = _checked(n, buf)
    view[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative: {count}, {size}")
    return bytearray(count * size)


def memcpy(dst: Optional[_B], src, n: int) -> Optional[_B]:
    """Copy *n* bytes from *src* to *dst*; return *dst*.

    When both buffers are ``None`` nothing is done and ``None`` is returned.
    """
    if dst is None and src is None:
        return None
    dst_view, src_view = _checked(n, dst, src)
    dst_view[:n] = src_view[:n].tobytes()
    return dst


def memmove(dst: Optional[_B], src, n: int) -> Optional[_B]:
    """Copy *n* bytes from *src* to *dst*, correct even when they overlap."""
    if dst is None and src is None:
        return None
    dst_view, src_view = _checked(n, dst, src)
    # Taking a snapshot of the source makes overlapping regions safe.
    dst_view[:n] = src_view[:n].tobytes()
    return dst


def memchr(s, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c & 0xFF`` in ``s[:n]``."""
    (view,) = _checked(n, s)
    index = view[:n].tobytes().find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch."""
    if n == 0:
        return 0
    a, b = _checked(n, s1, s2)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0