"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one. Data is read
    ``buffer_size`` units at a time and anything read past a newline is
    kept for the next line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _read(self) -> AnyStr:
        try:
            chunk = self._stream.read(self._buffer_size)
        except OSError:
            self._pending = None
            raise
        if chunk is None:
            chunk = self._stream.read(0) if self._pending is None else self._pending[:0]
        return chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        if pending is None:
            pending = self._read()
            if not pending:
                self._pending = pending
                return None
        newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
        while newline not in pending:
            chunk = self._read()
            if not chunk:
                break
            pending += chunk
        if not pending:
            self._pending = pending
            return None
        index = pending.find(newline)
        if index < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line