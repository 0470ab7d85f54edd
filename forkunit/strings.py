"""String building: slicing, joining, trimming, splitting and bounded copies.

Strings are immutable, so these functions return new values. The bounded
copy helpers report the length they tried to create, which is how a caller
detects truncation.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, NamedTuple, TypeVar

__all__ = [
    "BoundedCopy",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]

T = TypeVar("T")


class BoundedCopy(NamedTuple):
    """Result of a size-limited copy.

    ``text`` is what fits in the destination; ``length`` is the length of
    the string the operation tried to create. ``length >= size`` means the
    result was truncated.
    """

    text: str
    length: int


def _check_separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _check_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeats."""
    return [word for word in s.split(_check_separator(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[T], func: Callable[[int, MutableSequence[T]], None]
) -> MutableSequence[T]:
    """Call ``func(index, s)`` for each position of ``s``.

    The callback may change ``s[index]`` in place. The same sequence is
    returned.
    """
    for index in range(len(s)):
        func(index, s)
    return s


def strlcpy(src: str, size: int) -> BoundedCopy:
    """Copy ``src`` into a destination that holds ``size`` bytes with its NUL.

    At most ``size - 1`` characters are kept. The reported length is always
    that of ``src``. A size of zero copies nothing.
    """
    _check_non_negative("size", size)
    if size == 0:
        return BoundedCopy("", len(src))
    return BoundedCopy(src[:size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dst`` within a total buffer of ``size`` bytes.

    When ``size`` does not exceed the length of ``dst`` nothing is appended
    and the reported length is ``len(src) + size``; otherwise it is
    ``len(dst) + len(src)``.
    """
    _check_non_negative("size", size)
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return BoundedCopy(dst, src_len + size)
    room = size - 1 - dst_len
    return BoundedCopy(dst + src[:room], dst_len + src_len)