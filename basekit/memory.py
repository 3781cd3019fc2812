"""Byte-buffer helpers: search, compare, fill, copy and overlapping moves."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(name: str, size: int, offset: int, length: int) -> None:
    if offset < 0 or length < 0:
        raise ValueError("offsets and lengths must not be negative")
    if offset + length > size:
        raise ValueError(f"{name} is too short for {length} bytes at {offset}")


def find_byte(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to value & 0xFF in data[:length], or None."""
    _check_span("data", len(data), 0, length)
    index = bytes(data[:length]).find(value & 0xFF)
    return index if index >= 0 else None


def compare_bytes(first: BytesLike, second: BytesLike, length: int) -> int:
    """Difference of the first differing bytes within length, 0 if none."""
    _check_span("first", len(first), 0, length)
    _check_span("second", len(second), 0, length)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first length bytes of buffer to value & 0xFF; returns buffer."""
    _check_span("buffer", len(buffer), 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def copy_into(destination: bytearray, source: BytesLike, length: int) -> bytearray:
    """Copy the first length bytes of source to destination; returns it."""
    _check_span("destination", len(destination), 0, length)
    _check_span("source", len(source), 0, length)
    destination[:length] = bytes(source[:length])
    return destination


def move_within(
    buffer: bytearray, destination: int, source: int, length: int
) -> bytearray:
    """Move length bytes from offset source to offset destination.

    The regions may overlap; the result is as if the bytes were first copied
    aside. Returns buffer.
    """
    _check_span("buffer", len(buffer), source, length)
    _check_span("buffer", len(buffer), destination, length)
    buffer[destination:destination + length] = bytes(
        buffer[source:source + length]
    )
    return buffer