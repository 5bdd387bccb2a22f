"""Searching, comparing, copying, joining, trimming and splitting strings."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional

_NUL = "\0"


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(c) == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(c) == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code-point difference at the first mismatch, or 0 when the
    compared parts are equal. A string that ends early compares as NUL.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little within the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src, so a truncated copy
    shows as a length that is not less than size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dst, dst is left as is and the length
    returned is len(src) + size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from index start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; an empty string when either is missing."""
    if s1 is None or s2 is None:
        return ""
    return s1 + s2


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in charset from both ends of text."""
    if text is None:
        raise TypeError("text is required")
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty words."""
    _single(sep)
    return [word for word in text.split(sep) if word]