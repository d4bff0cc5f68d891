"""String helpers: searching, comparing, slicing, joining, trimming and splitting.

A string is treated as ending where its text ends. Searching for the NUL
character finds that end.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, TypeVar

NUL = "\0"

T = TypeVar("T")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL gives the index just past the text.
    """
    _check_char(c)
    if c == NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL gives the index just past the text.
    """
    _check_char(c)
    if c == NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal codes.

    The end of a string compares as code 0, so a shorter prefix sorts first.
    """
    _check_count(n, "count")
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly within big[:n], or None.

    An empty little is found at index 0.
    """
    _check_count(n, "length")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin expects two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split s on sep, dropping empty words."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    buffer: MutableSequence[T], func: Callable[[int, T], Any]
) -> MutableSequence[T]:
    """Call func(index, item) for each item of buffer, in order.

    A result other than None replaces the item in place. The buffer is returned.
    """
    for index, item in enumerate(list(buffer)):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement
    return buffer


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a destination of size slots, one kept for the terminator.

    Returns the copied text and the full length of src; a result length of
    size or more means the copy was truncated.
    """
    _check_count(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a destination of size slots.

    Returns the resulting text and the length it tried to create. When dst
    already fills size, it is returned unchanged with size + len(src).
    """
    _check_count(size, "size")
    dst_len = min(len(dst), size)
    if dst_len >= size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)