"""String utilities with the semantics of the classic C string routines.

Searches return an index, or None when nothing is found. The
length-bounded copy routines return a ``BoundedString``, which holds the
resulting text and the length the routine reports. The reported length
lets a caller detect truncation.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Callable, Iterator, NamedTuple, Optional

_TERMINATOR = "\0"


class BoundedString(NamedTuple):
    """Result of a size-bounded copy: the text written and the reported length."""

    text: str
    length: int


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_size(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Number of characters in *s*."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of *s*. Strings are immutable, so this is *s* itself."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be str")
    return s1 + s2


def split(s: str, c: str) -> list[str]:
    """Split *s* on the character *c*, dropping empty pieces."""
    _check_char(c)
    return [word for word in s.split(c) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first *c* in *s*, or None.

    Searching for the terminator character ``"\\0"`` finds the end of the
    string and returns ``len(s)``.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last *c* in *s*, or None.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` for each character of *s*.

    When *f* returns a character it replaces the original; when it
    returns None the character is kept. The resulting string is returned.
    """
    if not callable(f):
        raise TypeError("f must be callable")

    def replaced() -> Iterator[str]:
        for index, ch in enumerate(s):
            new = f(index, ch)
            yield ch if new is None else _check_char(new)

    return "".join(replaced())


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of *s*."""
    if not callable(f):
        raise TypeError("f must be callable")
    return "".join(_check_char(f(index, ch)) for index, ch in enumerate(s))


def strlcpy(dst: str, src: str, size: int) -> BoundedString:
    """Copy *src* into a buffer of *size* characters including the terminator.

    At most ``size - 1`` characters of *src* are kept. With a size of 0
    *dst* is left unchanged. The reported length is always ``len(src)``.
    """
    _check_size(size, "size")
    text = src[:size - 1] if size > 0 else dst
    return BoundedString(text, len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedString:
    """Append *src* to *dst* within a buffer of *size* characters.

    The result holds at most ``size - 1`` characters. The reported length
    is ``min(len(dst), size) + len(src)``, the length the full result
    would have had.
    """
    _check_size(size, "size")
    dst_length = len(dst)
    text = dst
    if size > 0 and dst_length < size - 1:
        text = dst + src[:size - 1 - dst_length]
    return BoundedString(text, min(dst_length, size) + len(src))


def _padded(s: str) -> Iterator[int]:
    return chain((ord(ch) for ch in s), repeat(0))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, with
    the end of a string counting as 0, or 0 when they match.
    """
    _check_size(n, "n")
    for a, b in islice(zip(_padded(s1), _padded(s2)), n):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    if not isinstance(charset, str):
        raise TypeError("charset must be a str")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]