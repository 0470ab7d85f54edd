"""Checks of the string, number, character and buffer helpers.

Each check returns ``0`` when it passes and a non-zero status otherwise,
so it can be loaded directly into a :class:`forkunit.framework.TestSuite`.
The file-based checks look for their fixtures in ``base``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from forkunit.chars import is_alpha
from forkunit.compare import strcmp, strncmp
from forkunit.lines import LineReader
from forkunit.memory import bzero, memset
from forkunit.numbers import atoi
from forkunit.strings import strlcpy

__all__ = [
    "DEFAULT_TESTFILES",
    "basic_line_test",
    "empty_file_test",
    "strcpy_basic",
    "strcpy_empty",
    "strncmp_equal",
    "strncmp_different",
    "atoi_basic",
    "atoi_negative",
    "atoi_invalid",
    "memset_basic",
    "memset_zero_len",
    "strdup_basic",
    "strdup_empty",
    "isalpha_basic",
    "bzero_basic",
    "bzero_zero_len",
]

DEFAULT_TESTFILES = Path("real-tests") / "testfiles"

PathLike = Union[str, "os.PathLike[str]"]


def _c_string(buffer: bytearray) -> str:
    """The text of a buffer up to its first NUL byte."""
    end = buffer.find(0)
    data = buffer if end < 0 else buffer[:end]
    return data.decode("latin-1")


def _duplicate(s: str) -> str:
    return strlcpy(s, len(s) + 1).text


def basic_line_test(base: PathLike = DEFAULT_TESTFILES) -> int:
    """The first line of ``basic.txt`` is ``Hello World`` with its newline."""
    try:
        handle = open(Path(base) / "basic.txt", encoding="utf-8", newline="")
    except OSError:
        return -1
    with handle:
        line = LineReader(handle).next_line()
    if line is not None and strcmp(line, "Hello World\n") == 0:
        return 0
    return 1


def empty_file_test(base: PathLike = DEFAULT_TESTFILES) -> int:
    """Reading ``empty.txt`` yields no line at all."""
    try:
        handle = open(Path(base) / "empty.txt", encoding="utf-8", newline="")
    except OSError:
        return -1
    with handle:
        line = LineReader(handle).next_line()
    return 0 if line is None else -1


def strcpy_basic() -> int:
    dest = strlcpy("Hello", 20).text
    return 0 if strcmp(dest, "Hello") == 0 else -1


def strcpy_empty() -> int:
    dest = strlcpy("test", 10).text
    dest = strlcpy("", 10).text
    return 0 if dest == "" else -1


def strncmp_equal() -> int:
    return 0 if strncmp("Hello", "Hello", 5) == 0 else -1


def strncmp_different() -> int:
    return 0 if strncmp("Hello", "World", 5) != 0 else -1


def atoi_basic() -> int:
    return 0 if atoi("42") == 42 else -1


def atoi_negative() -> int:
    return 0 if atoi("-42") == -42 else -1


def atoi_invalid() -> int:
    return 0 if atoi("abc") == 0 else -1


def memset_basic() -> int:
    buffer = bytearray(10)
    memset(buffer, ord("A"), 5)
    buffer[5] = 0
    return 0 if strcmp(_c_string(buffer), "AAAAA") == 0 else -1


def memset_zero_len() -> int:
    buffer = bytearray(b"test\0")
    memset(buffer, ord("X"), 0)
    return 0 if strcmp(_c_string(buffer), "test") == 0 else -1


def strdup_basic() -> int:
    dup = _duplicate("Hello")
    return 0 if strcmp(dup, "Hello") == 0 else -1


def strdup_empty() -> int:
    dup = _duplicate("")
    return 0 if len(dup) == 0 else -1


def isalpha_basic() -> int:
    if is_alpha("A") and is_alpha("z") and not is_alpha("1") and not is_alpha("@"):
        return 0
    return -1


def bzero_basic() -> int:
    buffer = bytearray(10)
    buffer[:6] = b"hello\0"
    bzero(buffer, 3)
    if buffer[:3] == b"\0\0\0" and buffer[3] == ord("l"):
        return 0
    return -1


def bzero_zero_len() -> int:
    buffer = bytearray(b"test\0")
    bzero(buffer, 0)
    return 0 if strcmp(_c_string(buffer), "test") == 0 else -1