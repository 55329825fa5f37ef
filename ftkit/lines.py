"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Iterator, Optional, Union

Line = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Read lines, newline included, from any object with a read(size) method.

    Text streams yield str lines, binary streams yield bytes lines. Data is
    pulled from the stream at most buffer_size units at a time; whatever
    follows a newline in a chunk is kept for the next call.
    """

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def _take(self, end: int) -> Line:
        assert self._pending is not None
        line = self._pending[:end]
        rest = self._pending[end:]
        self._pending = rest if rest else None
        return line

    def read_line(self) -> Optional[Line]:
        """Return the next line, ending with its newline if it has one.

        Returns None once the stream is exhausted and nothing is left over.
        If the stream raises while reading, the leftover data is discarded
        and the error propagates.
        """
        scanned = 0
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline, scanned)
                if index >= 0:
                    return self._take(index + 1)
                scanned = len(self._pending)
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                if self._pending:
                    return self._take(len(self._pending))
                self._pending = None
                return None
            if isinstance(chunk, (bytearray, memoryview)):
                chunk = bytes(chunk)
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line