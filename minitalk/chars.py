"""Character classification and integer/text conversion in the C locale."""

from __future__ import annotations

from typing import overload

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c):
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c):
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return -value if negative else value


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(int(n))