"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(name: str, data: ReadableBuffer, n: int, start: int = 0) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > len(data):
        raise ValueError(
            f"{name} holds {len(data)} bytes; {n} bytes at offset {start} do not fit"
        )


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first n bytes of buffer to value (truncated to a byte)."""
    _check_span("buffer", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_span("buffer", buffer, n)
    index = bytes(buffer[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check_span("first", first, n)
    _check_span("second", second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first n bytes of src into the start of dest."""
    _check_span("src", src, n)
    _check_span("dest", dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy n bytes from offset src to offset dest within one buffer.

    Overlapping regions are handled as if through an intermediate copy.
    """
    _check_span("buffer", buffer, n, src)
    _check_span("buffer", buffer, n, dest)
    if src != dest:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer