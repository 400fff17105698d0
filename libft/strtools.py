"""String building helpers that return new strings.

These cover substrings, joining, trimming, splitting, integer formatting
and applying a function to each character.  Input strings are read up to
their first ``"\\0"`` character, the way a NUL-terminated string is read.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from libft.cstr import strdup

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "itoa",
    "strmapi",
    "striteri",
]

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _non_negative(value: int, name: str) -> int:
    """Validate that ``value`` is a non-negative int."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _separator(c: int | str) -> str:
    """Return the separator character for ``c``, a character or a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    text = strdup(s)
    begin = _non_negative(start, "start")
    count = _non_negative(length, "length")
    if begin > len(text):
        return ""
    return text[begin : begin + count]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = strdup(s)
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, c: int | str) -> list[str]:
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    text = strdup(s)
    sep = _separator(c)
    return [word for word in text.split(sep) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(strdup(s)))


def striteri(s: MutableSequence[str], f: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call ``f(index, s)`` for each character of the mutable sequence ``s``.

    ``f`` may change ``s[index]`` in place.  Iteration stops at the end of
    the sequence or at a ``"\\0"`` element, which is checked afresh before
    every call, so a callback that writes one ends the walk.
    """
    if not isinstance(s, MutableSequence):
        raise TypeError(f"expected a mutable sequence of characters, got {type(s).__name__}")
    index = 0
    while index < len(s) and s[index] != "\0":
        f(index, s)
        index += 1