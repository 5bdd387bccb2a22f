"""Character classification, case mapping and integer/string conversion."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Union

Char = Union[str, int]

_ATOI_SPACE = " \t\n\r\f\v"


def _code(c: Char) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift_case(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    return _shift_case(c, "a", "z", -32)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    return _shift_case(c, "A", "Z", 32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does; 0 when there is none."""
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = []
    value = abs(n)
    while True:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
        if value == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Apply func(index, item) to every item in place.

    The item is replaced with what func returns, unless it returns None.
    """
    for index, item in enumerate(chars):
        replacement = func(index, item)
        if replacement is not None:
            chars[index] = replacement