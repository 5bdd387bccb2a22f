"""Byte-buffer filling, copying, searching and comparison."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_CALLOC_LIMIT = 4294967295


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"n ({n}) exceeds buffer length ({len(buf)})")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of c; returns buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Zero the first n bytes of buf; returns buf."""
    return memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first n bytes of src into dest; returns dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to dest through a temporary copy, so overlap is safe."""
    _check_count(n, dest, src)
    staged = bytes(src[:n])
    dest[:n] = staged
    return dest


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of c within n bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare n bytes: -1 if a sorts first, 1 if b does, 0 if equal."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of nmemb * size bytes.

    Raises MemoryError when the product would exceed the 32-bit size limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if size and _CALLOC_LIMIT // size < nmemb:
        raise MemoryError("requested allocation is too large")
    return bytearray(nmemb * size)