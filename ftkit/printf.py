"""A small printf with the conversions c, s, p, d, i, u, x, X and %.

Conversions take no flags, widths or precisions. An unknown conversion
character produces no output and consumes no argument. A lone '%' at the
end of the format is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional

from ftkit.convert import itoa

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _hex_digits(num: int, upper: bool) -> str:
    alphabet = _HEX_UPPER if upper else _HEX_LOWER
    if num == 0:
        return "0"
    digits = []
    while num:
        num, digit = divmod(num, 16)
        digits.append(alphabet[digit])
    return "".join(reversed(digits))


def to_hex(num: int, upper: bool = False) -> str:
    """Hexadecimal digits of *num* taken as a 32-bit unsigned value."""
    return _hex_digits(_require_int(num, "x") & _UINT32_MASK, upper)


def format_pointer(ptr: Optional[int]) -> str:
    """``0x`` followed by the lower-case hex of a 64-bit address; None is 0."""
    address = 0 if ptr is None else _require_int(ptr, "p") & _UINT64_MASK
    return "0x" + _hex_digits(address, False)


def format_unsigned(n: int) -> str:
    """Decimal form of *n* taken as a 32-bit unsigned value."""
    return str(_require_int(n, "u") & _UINT32_MASK)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_int(value: Any) -> str:
    return itoa(_to_int32(_require_int(value, "d")))


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": format_unsigned,
    "x": lambda value: to_hex(value, False),
    "X": lambda value: to_hex(value, True),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(arguments)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        yield convert(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)