"""Fork-isolated unit-test runner with C-style string, memory and line-reading helpers."""

__version__ = "0.1.0"