"""NUL-terminated string routines: length, search, compare, bounded copy.

Strings are Python ``str`` objects read the way a C string is read: a
``"\\0"`` character, if present, ends the string and nothing after it is
seen.  Search functions return an index into the string, or ``None`` when
nothing is found.  The bounded copy functions return the resulting text
together with the length they would have needed.
"""

from __future__ import annotations

import re

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "atoi",
    "strdup",
]

_NUL = "\0"
_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char_code(c: int | str) -> int:
    """Return the code searched for: a character's code, or an int cut to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c & 0xFF
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _size(n: int) -> int:
    """Validate a size argument, which must be a non-negative int."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int size, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    return n


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit two's-complement int."""
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def strlen(s: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference between the
    codes of the first pair of characters that differ; the end of a string
    counts as code 0.
    """
    limit = _size(n)
    first = _terminated(s1)[:limit]
    second = _terminated(s2)[:limit]
    for a, b in zip(first + _NUL, second + _NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of ``needle`` within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0.  The whole needle must lie inside
    the first ``n`` characters; otherwise None is returned.
    """
    limit = _size(n)
    hay = _terminated(haystack)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = hay[:limit].find(pattern)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters, NUL included.

    Returns the resulting text and the length of ``src``; a result length
    of ``dstsize`` or more means the copy was truncated.  With a size of
    zero the destination is left as it was.
    """
    size = _size(dstsize)
    source = _terminated(src)
    if size == 0:
        return _terminated(dst), len(source)
    return source[: size - 1], len(source)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full concatenation would
    have had.  When ``dstsize`` is no larger than ``dst`` the text is left
    as it was and the length returned is ``strlen(src) + dstsize``.
    """
    size = _size(dstsize)
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return head, len(tail) + size
    return head + tail[: size - 1 - len(head)], len(head) + len(tail)


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return, space) is skipped, then one optional sign and ASCII digits are
    read.  Anything else stops the parse; no digits gives 0.  The result
    wraps like a 32-bit int.
    """
    match = _ATOI_PATTERN.match(_terminated(s))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int(value)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminating NUL."""
    return _terminated(s)