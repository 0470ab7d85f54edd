"""The default suite of checks and the command that runs it."""

from __future__ import annotations

import argparse
import os
from functools import partial
from typing import Callable, List, Optional, Sequence, TextIO, Tuple, Union

from forkunit import checks
from forkunit.checks import DEFAULT_TESTFILES
from forkunit.framework import TestSuite

__all__ = ["build_suite", "launcher", "main"]

PathLike = Union[str, "os.PathLike[str]"]

_PLAIN_CHECKS: Tuple[Tuple[str, Callable[[], int]], ...] = (
    ("ft_strcpy basic_test", checks.strcpy_basic),
    ("ft_strcpy empty_test", checks.strcpy_empty),
    ("ft_strncmp_equal_test", checks.strncmp_equal),
    ("ft_strncmp_different_test", checks.strncmp_different),
    ("ft_atoi_basic_test", checks.atoi_basic),
    ("ft_atoi_negative_test", checks.atoi_negative),
    ("ft_memset basic_test", checks.memset_basic),
    ("ft_memset zero_len_test", checks.memset_zero_len),
    ("ft_strdup_basic_test", checks.strdup_basic),
    ("ft_strdup_empty_test", checks.strdup_empty),
    ("ft_isalpha basic", checks.isalpha_basic),
    ("ft_bzero basic tests", checks.bzero_basic),
    ("ft_bzero zero len tests", checks.bzero_zero_len),
)


def build_suite(base: PathLike = DEFAULT_TESTFILES) -> TestSuite:
    """The standard suite, with file-based checks reading from ``base``."""
    suite = TestSuite()
    suite.load_test("ft_GNL basic text", partial(checks.basic_line_test, base))
    suite.load_test("ft_GNL empty file test", partial(checks.empty_file_test, base))
    for name, func in _PLAIN_CHECKS:
        suite.load_test(name, func)
    return suite


def launcher(base: PathLike = DEFAULT_TESTFILES, stream: Optional[TextIO] = None) -> int:
    """Run the standard suite; 0 when every test passed, -1 otherwise."""
    results = build_suite(base).launch(stream)
    return 0 if all(result.passed for result in results) else -1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the standard suite and report to stdout."""
    parser = argparse.ArgumentParser(
        prog="forkunit",
        description="Run the standard checks, each in its own process.",
    )
    parser.add_argument(
        "testfiles",
        nargs="?",
        default=str(DEFAULT_TESTFILES),
        help="directory holding basic.txt and empty.txt",
    )
    args: argparse.Namespace = parser.parse_args(
        None if argv is None else list(argv)
    )
    launcher(args.testfiles)
    return 0


def _names(suite: TestSuite) -> List[str]:
    return [test.name for test in suite]