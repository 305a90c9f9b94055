"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Return successive lines from a file descriptor.

    Data is read in chunks of ``buffer_size`` bytes. Each line keeps its
    trailing newline; the last line of input may lack one. Bytes read past
    the end of a line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _cut(self) -> bytes:
        end = self._pending.find(b"\n")
        if end < 0:
            line = bytes(self._pending)
            self._pending.clear()
        else:
            line = bytes(self._pending[:end + 1])
            del self._pending[:end + 1]
        return line

    def read_line(self) -> Optional[bytes]:
        """The next line, or None once the input is exhausted.

        Errors from reading the descriptor propagate as OSError.
        """
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        return self._cut()

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line