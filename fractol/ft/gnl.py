"""Read a source line by line, keeping what was read past the line end."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Optional, Union

BUFFER_SIZE = 1024

Source = Union[int, BinaryIO]


class LineReader:
    """Return successive lines from a file descriptor or binary stream.

    Each line keeps its trailing newline; the final line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._source = source
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size) or b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the source is exhausted.

        A read error discards any buffered data and propagates.
        """
        while (newline := self._pending.find(b"\n")) < 0:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                line = bytes(self._pending) or None
                self._pending.clear()
                return line
            self._pending += chunk
        end = newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line