"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
# Largest value that can still take another digit without leaving 64 bits.
_OVERFLOW_LIMIT = 922337203685477580


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _overflows(number: int, digit: int, negative: bool) -> bool:
    last_allowed = 8 if negative else 7
    return (number >= _OVERFLOW_LIMIT and digit > last_allowed) or number > _OVERFLOW_LIMIT


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. A value beyond the 64-bit range gives -1
    when positive and 0 when negative; otherwise the result is wrapped to
    a 32-bit signed int. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    number = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        digit = ord(ch) - ord("0")
        if _overflows(number, digit, negative):
            return 0 if negative else -1
        number = number * 10 + digit
    return _to_int32(-number if negative else number)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n == 0:
        return "0"
    digits = []
    magnitude = abs(n)
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))