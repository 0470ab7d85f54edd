# forkunit

A small unit-test runner that runs every test in its own forked process, so
a test that crashes, whether by a fatal signal or an unhandled exception,
cannot take the runner down with it. It also provides C-style string, memory
and character helpers, a chunked line reader, and a built-in suite of checks
for those helpers.

Running tests in isolation needs the `fork` start method, so the runner works
on POSIX systems. On a platform without it, `run_isolated` raises
`RuntimeError`.

## Installing

```
pip install .
pip install ".[test]"   # to run the package's own tests with pytest
```

## Writing a suite

A test is a callable that takes no arguments. Returning `0` or `None` means
it passed; any other value becomes the child's exit status (truncated to a
byte) and marks it as failed. An exception that escapes the test is printed
and the test fails with status 1.

```python
import sys
from forkunit.framework import TestSuite

def ok_test():
    return 0 if len("hello") == 5 else 1

def ko_test():
    return 0 if len("42") == 10 else -1

suite = TestSuite()
suite.load_test("OK test", ok_test)
suite.load_test("KO test", ko_test)
results = suite.launch(sys.stdout)
```

`launch` runs the tests in the order they were loaded and prints one line per
test and a summary:

```
TEST: OK test : [OK]
TEST: KO test : [KO]
1/2 tests checked
```

It returns a list of `TestResult` objects, each with `name`, `outcome` (an
`Outcome` member: `OK`, `KO`, `SEGV`, `BUS` or `SIGNAL`), `code` (the exit
status, or the signal number for a test killed by a signal), and the
properties `passed` and `label`. A test killed by a signal is reported as
`[SEGV]`, `[BUS]` or `[SIG n]`; `describe(outcome, code)` produces these
labels.

`TestSuite` also supports `len()` and iteration over its `UnitTest` entries
(`name`, `func`). To run a single callable in a child process directly, use
`run_isolated(func)`, which returns an `(Outcome, code)` pair.

## The built-in suite

`forkunit.launcher.build_suite(base)` builds a suite from the checks in
`forkunit.checks`: line reading, `strcpy`, `strncmp`, `atoi`, `memset`,
`strdup`, `is_alpha` and `bzero`. Each check returns `0` on success and a
non-zero status otherwise. The two line-reading checks open `basic.txt`
(whose first line must be `Hello World`) and `empty.txt` (which must be
empty) in the directory `base`, which defaults to `real-tests/testfiles`
relative to the current directory.

`forkunit.launcher.launcher(base, stream)` runs that suite and returns `0`
when every test passed and `-1` otherwise. From the command line:

```
forkunit                  # sample files in real-tests/testfiles
forkunit path/to/files    # sample files in another directory
```

The command prints the report to standard output and always exits with
status 0.

## Helpers

- `forkunit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each takes a one-character string or an
  integer code; the case converters return the same kind they were given.
- `forkunit.numbers`: `atoi` (leading whitespace, one optional sign, stops at
  the first non-digit, wraps to 32 bits) and `itoa` (raises `OverflowError`
  outside the 32-bit signed range).
- `forkunit.compare`: `strcmp`, `strncmp`, `strchr`, `strrchr`, `strnstr`.
  The searches return an index, or `None` when nothing is found.
- `forkunit.strings`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`, `strlcpy`, `strlcat`. The two bounded copies return a
  `BoundedCopy(text, length)`, where `length >= size` signals truncation.
- `forkunit.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc`, working on `bytearray` buffers in place. `memmove`
  takes one buffer with destination and source offsets. Counts larger than a
  buffer raise `ValueError`.
- `forkunit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to
  a given text stream or to standard output.
- `forkunit.lines`: `LineReader(stream, buffer_size=42)`, which reads a text
  or binary stream in chunks and returns one line at a time, newline
  included, through `next_line()` (giving `None` at the end) or by iteration.

```python
import io
from forkunit.lines import LineReader

reader = LineReader(io.BytesIO(b"Hello World\nbye"), 42)
assert reader.next_line() == b"Hello World\n"
assert reader.next_line() == b"bye"
assert reader.next_line() is None
```

## What it does not do

- It does not discover tests: a suite is built by calling `load_test`, and
  the `forkunit` command only runs the built-in suite.
- It does not ship the sample files `basic.txt` and `empty.txt`; without
  them in the chosen directory the two line-reading checks fail.
- It has no timeouts: a test that never returns keeps the runner waiting.