"""String comparison and searching.

Searches return the index of the match, or ``None`` when nothing is found.
The end of a string behaves like a terminating NUL: searching for code 0
finds the position just past the last character.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator, Optional, Union

__all__ = ["strcmp", "strncmp", "strchr", "strrchr", "strnstr"]


def _codes(s: str) -> Iterator[int]:
    return (ord(ch) for ch in s)


def _search_char(c: Union[str, int]) -> str:
    """Normalise the character to look for.

    An integer code is truncated to a byte, as a char conversion would.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c % 256)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference of the first differing codes."""
    for a, b in zip_longest(_codes(s1), _codes(s2), fillvalue=0):
        if a != b:
            return a - b
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None."""
    ch = _search_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(s)
    return None


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None."""
    ch = _search_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    needed = len(little)
    if length < needed:
        return None
    last_start = min(len(big), length - needed + 1)
    for start in range(last_start):
        if big.startswith(little, start):
            return start
    return None