"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 1000


class LineReader:
    """Reads lines from a file descriptor in chunks of buffer_size bytes.

    Each line keeps its trailing newline; a final line without one is
    returned as it is.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def read_line(self) -> Optional[str]:
        """The next line, or None once the descriptor is exhausted.

        A read error discards any buffered data and propagates as OSError.
        """
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[:newline + 1])
                del self._pending[:newline + 1]
                return self._decode(line)
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line = bytes(self._pending)
        self._pending.clear()
        return self._decode(line)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of fd."""
    yield from LineReader(fd, buffer_size)