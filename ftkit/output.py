"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to *fd*.

    A str must be a single character and is written as UTF-8; an int is
    written as its low byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected a str or int, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write *s* to *fd*; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write *s* followed by a newline; None writes nothing."""
    if s is None:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of *n* to *fd*."""
    putstr_fd(itoa(n), fd)