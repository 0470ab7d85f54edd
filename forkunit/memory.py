"""Byte-buffer operations on mutable byte sequences.

Functions that write take a ``bytearray`` (or any mutable buffer supporting
slice assignment) and change it in place. Lengths are checked against the
buffers: asking for more bytes than a buffer holds raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

ByteSource = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ByteSource) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"n ({n}) exceeds buffer length ({len(buf)})")


def _check_region(buffer: ByteSource, offset: int, n: int, name: str) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if offset + n > len(buffer):
        raise ValueError(f"{name} region [{offset}, {offset + n}) is outside the buffer")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled: the result is as if the source bytes
    were first copied aside.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    _check_region(buffer, src, n, "source")
    _check_region(buffer, dest, n, "destination")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: ByteSource, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first differing bytes."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)