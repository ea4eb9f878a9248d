"""Reading a file descriptor or binary stream one line at a time."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Union

BUFFER_SIZE = 42

Source = Union[int, BinaryIO]


class LineReader:
    """Yield lines, newline included, from a descriptor or a binary stream.

    Data is read in chunks of ``buffer_size`` bytes; whatever follows the
    last returned newline is kept for the next call.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, int) and fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._source = fd
        self._buffer_size = buffer_size
        self._stash = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size) or b""

    def _fill(self) -> None:
        while b"\n" not in self._stash:
            chunk = self._read_chunk()
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` once nothing is left to read."""
        try:
            self._fill()
        except OSError:
            self._stash.clear()
            raise
        if not self._stash:
            return None
        end = self._stash.find(b"\n")
        cut = len(self._stash) if end < 0 else end + 1
        line = bytes(self._stash[:cut])
        del self._stash[:cut]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line