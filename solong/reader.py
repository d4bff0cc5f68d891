"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


def _newline_index(data: AnyStr) -> int:
    """Return the index of the first newline in data, or -1 if there is none."""
    separator = b"\n" if isinstance(data, bytes) else "\n"
    return data.find(separator)  # type: ignore[arg-type]


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream in chunks of buffer_size.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _has_line(self) -> bool:
        return self._pending is not None and _newline_index(self._pending) >= 0

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while not self._has_line():
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            self._pending = None
            return None
        pending = self._pending
        end = _newline_index(pending)
        if end < 0:
            self._pending = None
            return pending
        line, rest = pending[: end + 1], pending[end + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of stream, each with its trailing newline if present."""
    yield from LineReader(stream, buffer_size)