"""A small unit-test runner that executes every test in a forked child.

Running each test in its own process means a test that crashes, whether by
a fatal signal or by an unhandled exception, cannot take the runner down
with it. A test function returns ``0`` (or ``None``) to pass. Any other
value becomes the child's exit status and marks the test as failed.
"""

from __future__ import annotations

import faulthandler
import multiprocessing
import os
import signal
import sys
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, TextIO, Tuple

__all__ = [
    "Outcome",
    "TestResult",
    "UnitTest",
    "TestSuite",
    "run_isolated",
    "describe",
]

TestFunc = Callable[[], Optional[int]]

_FATAL_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGSEGV", "SIGBUS") if hasattr(signal, name)
)


class Outcome(Enum):
    """How a test process ended."""

    OK = "OK"
    KO = "KO"
    SEGV = "SEGV"
    BUS = "BUS"
    SIGNAL = "SIG"


def describe(outcome: Outcome, code: int) -> str:
    """The bracketed status label printed for a test.

    ``code`` is the signal number for :attr:`Outcome.SIGNAL` and is
    otherwise not shown.
    """
    if outcome is Outcome.SIGNAL:
        return f"[SIG {code}]"
    return f"[{outcome.value}]"


@dataclass(frozen=True)
class TestResult:
    """The result of one test: its name, outcome and exit code or signal."""

    __test__ = False

    name: str
    outcome: Outcome
    code: int

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def label(self) -> str:
        return describe(self.outcome, self.code)


@dataclass(frozen=True)
class UnitTest:
    """A named test function."""

    name: str
    func: TestFunc


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, OSError, ValueError):
            pass


def _exit_code(result: object) -> int:
    if result is None:
        return 0
    return int(result) & 0xFF


def _run_child(func: TestFunc) -> None:
    """Run ``func`` in the child process and leave with its status."""
    code = 1
    try:
        if faulthandler.is_enabled():
            faulthandler.disable()
        for signum in _FATAL_SIGNALS:
            signal.signal(signum, signal.SIG_DFL)
        code = _exit_code(func())
    except SystemExit as exc:
        if exc.code is None:
            code = 0
        elif isinstance(exc.code, int):
            code = exc.code & 0xFF
        else:
            code = 1
    except BaseException:
        traceback.print_exc()
        code = 1
    finally:
        _flush_standard_streams()
        os._exit(code)


def _decode_exitcode(exitcode: Optional[int]) -> Tuple[Outcome, int]:
    if exitcode is None:
        return Outcome.KO, 1
    if exitcode >= 0:
        return (Outcome.OK if exitcode == 0 else Outcome.KO), exitcode
    signum = -exitcode
    if signum == getattr(signal, "SIGSEGV", None):
        return Outcome.SEGV, signum
    if signum == getattr(signal, "SIGBUS", None):
        return Outcome.BUS, signum
    return Outcome.SIGNAL, signum


def _fork_context():
    try:
        return multiprocessing.get_context("fork")
    except ValueError as exc:
        raise RuntimeError("running tests in isolation requires fork support") from exc


def run_isolated(func: TestFunc) -> Tuple[Outcome, int]:
    """Run ``func`` in a forked child and report how the child ended.

    Returns the outcome together with the exit status (for OK and KO) or
    the terminating signal number (for SEGV, BUS and other signals).
    """
    context = _fork_context()
    _flush_standard_streams()
    process = context.Process(target=_run_child, args=(func,))
    process.start()
    process.join()
    return _decode_exitcode(process.exitcode)


class TestSuite:
    """An ordered collection of tests, each run in its own process."""

    __test__ = False

    def __init__(self) -> None:
        self._tests: List[UnitTest] = []

    def load_test(self, name: str, func: TestFunc) -> UnitTest:
        """Append a test to the end of the suite."""
        test = UnitTest(name, func)
        self._tests.append(test)
        return test

    def launch(self, stream: Optional[TextIO] = None) -> List[TestResult]:
        """Run every test in order, printing one status line per test.

        A summary line ``passed/total tests checked`` follows. Output goes
        to standard output unless ``stream`` is given.
        """
        out = sys.stdout if stream is None else stream
        results: List[TestResult] = []
        for test in self._tests:
            out.flush()
            outcome, code = run_isolated(test.func)
            result = TestResult(test.name, outcome, code)
            print(f"TEST: {test.name} : {result.label}", file=out)
            results.append(result)
        passed = sum(1 for result in results if result.passed)
        print(f"{passed}/{len(results)} tests checked", file=out)
        out.flush()
        return results

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[UnitTest]:
        return iter(self._tests)