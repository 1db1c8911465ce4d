"""Byte and string searching, comparison, splitting and slicing helpers."""

from __future__ import annotations

from typing import Callable, Optional, Union

CharLike = Union[int, str]


def _byte(c: Union[int, bytes]) -> int:
    """Return c as an unsigned byte value."""
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    return int(c) & 0xFF


def _char_code(c: CharLike) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _terminated(text: str) -> str:
    """Return text up to its first NUL character."""
    return text.split("\0", 1)[0]


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buffer)}")


def find_byte(data: bytes, c: Union[int, bytes], n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n bytes.

    Returns None when the byte does not occur there.
    """
    _check_count(n, data)
    index = data.find(bytes([_byte(c)]), 0, n)
    return None if index < 0 else index


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def compare(a: str, b: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Comparison stops at the end of either string; a string's end counts as
    code 0. Returns the difference of the first differing codes, or 0.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n == 0:
        return 0
    left = [ord(ch) for ch in _terminated(a)[:n]]
    right = [ord(ch) for ch in _terminated(b)[:n]]
    left += [0] * (n - len(left))
    right += [0] * (n - len(right))
    for x, y in zip(left, right):
        if x != y or x == 0:
            return x - y
    return 0


def find_first(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in text.

    Searching for code 0 finds the end of the string, at len(text).
    """
    code = _char_code(c)
    text = _terminated(text)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def find_last(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in text.

    Searching for code 0 finds the end of the string, at len(text).
    """
    code = _char_code(c)
    text = _terminated(text)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where needle first lies wholly within the first length characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(needle)
    if not needle:
        return 0
    index = _terminated(haystack)[:length].find(needle)
    return None if index < 0 else index


def split_words(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: Optional[str]) -> str:
    """Remove characters in charset from both ends of text.

    With no charset the text is returned unchanged.
    """
    if not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(text)
    if start > len(text):
        return ""
    return text[start:start + length]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func applied to each index and character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))