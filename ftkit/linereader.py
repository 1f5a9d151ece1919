"""Reading a file descriptor one line at a time, in fixed-size chunks."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 5


def find_newline(text: Optional[Union[str, bytes, bytearray]]) -> int:
    """Return the length of the first line in *text*, newline included.

    Returns 0 when *text* is empty, ``None`` or holds no newline.
    """
    if not text:
        return 0
    newline = b"\n" if isinstance(text, (bytes, bytearray)) else "\n"
    return text.find(newline) + 1


class LineReader:
    """Return successive lines read from a file descriptor.

    Data is read *buffer_size* bytes at a time. Each line keeps its
    trailing newline; the last line of the input may lack one. Lines are
    decoded as UTF-8.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> int:
        """Read until a full line is pending or input ends; return the line length."""
        while True:
            length = find_newline(self._pending)
            if length:
                return length
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return len(self._pending)
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the input is exhausted."""
        length = self._fill()
        if length == 0:
            return None
        line = bytes(self._pending[:length])
        del self._pending[:length]
        return line.decode("utf-8")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line