"""Byte-buffer helpers: allocation, filling, copying, searching and comparing.

Buffers are ``bytearray`` objects (or anything supporting item and slice
assignment of bytes); sources may be any bytes-like object.  Where a length
reaches past the end of a buffer, ``ValueError`` is raised.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "allocate",
    "zero",
    "fill",
    "copy",
    "copy_until",
    "find_byte",
    "compare",
    "move",
]


def _check_span(data, count: int, what: str, offset: int = 0) -> None:
    if count < 0:
        raise ValueError(f"{what}: count must not be negative, got {count}")
    if offset < 0:
        raise ValueError(f"{what}: offset must not be negative, got {offset}")
    if offset + count > len(data):
        raise ValueError(
            f"{what}: {count} bytes at offset {offset} exceed length {len(data)}"
        )


def allocate(size: int) -> bytearray:
    """Return a new zero-filled buffer of *size* bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def zero(buffer: bytearray, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to zero and return it."""
    _check_span(buffer, length, "buffer")
    buffer[:length] = bytes(length)
    return buffer


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first *count* bytes of *buffer* to the low byte of *value*."""
    _check_span(buffer, count, "buffer")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def copy(dest: bytearray, src, count: int) -> bytearray:
    """Copy the first *count* bytes of *src* into the start of *dest*."""
    _check_span(dest, count, "dest")
    _check_span(src, count, "src")
    dest[:count] = bytes(src[:count])
    return dest


def copy_until(dest: bytearray, src, stop: int, size: int) -> Optional[int]:
    """Copy bytes from *src* to *dest* until the byte *stop* has been copied.

    At most *size* bytes are copied.  Returns the index in *dest* just past
    the copied stop byte, or ``None`` if it did not occur within *size* bytes.
    """
    _check_span(dest, size, "dest")
    _check_span(src, size, "src")
    target = stop & 0xFF
    source = bytes(src[:size])
    end = source.find(target)
    if end < 0:
        dest[:size] = source
        return None
    dest[: end + 1] = source[: end + 1]
    return end + 1


def find_byte(data, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *value* within *n* bytes."""
    _check_span(data, n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare(a, b, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first unequal pair."""
    _check_span(a, n, "a")
    _check_span(b, n, "b")
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def move(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy *count* bytes within *buffer*, correct even when the ranges overlap."""
    _check_span(buffer, count, "source range", src_offset)
    _check_span(buffer, count, "destination range", dest_offset)
    buffer[dest_offset : dest_offset + count] = bytes(
        buffer[src_offset : src_offset + count]
    )
    return buffer