"""Character classification and case conversion in the ASCII range.

Every function accepts either an integer character code or a
one-character string. Classification functions return a bool. The case
converters return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Raise an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code