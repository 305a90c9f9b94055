"""Byte-buffer operations over bytes and bytearray objects.

Functions that modify memory work in place on a bytearray (or another
mutable buffer) and return it. Offsets and lengths are checked, and a
range that falls outside a buffer raises ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ByteSource) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def _check_range(buffer: ByteSource, start: int, length: int) -> None:
    if start < 0 or start + length > len(buffer):
        raise ValueError(
            f"range [{start}, {start + length}) is outside buffer of size {len(buffer)}"
        )


def memset(buffer: bytearray, c: int, length: int) -> bytearray:
    """Fill the first *length* bytes with the low byte of *c*."""
    _check_length(length, buffer)
    buffer[:length] = bytes([c & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first *n* bytes to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: ByteSource, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *c* within the first *n*, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Difference of the first differing unsigned bytes in the first *n*, else 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Optional[bytearray], src: Optional[ByteSource], n: int) -> Optional[bytearray]:
    """Copy the first *n* bytes of *src* into *dst* and return *dst*."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("both buffers are required")
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy *length* bytes from offset *src* to offset *dst* in one buffer.

    The ranges may overlap; the result is as if the source bytes were first
    copied aside.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    _check_range(buffer, src, length)
    _check_range(buffer, dst, length)
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer