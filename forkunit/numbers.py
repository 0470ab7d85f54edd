"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the 32-bit two's-complement range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    Values beyond the 32-bit range wrap around.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    if not digits:
        return 0
    return _wrap_int32(int(digits) * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(int(n))