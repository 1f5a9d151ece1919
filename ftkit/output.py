"""Writing characters, strings and numbers straight to file descriptors.

Text is written as UTF-8. Each call writes everything it was given and
retries short writes. Errors from the operating system are raised as
:class:`OSError`.
"""

from __future__ import annotations

import os
from typing import Optional


def _write_all(fd: int, data: bytes) -> None:
    with memoryview(data) as view:
        while view:
            written = os.write(fd, view)
            view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character *c* to *fd*."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write *s* to *fd*; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write *s* followed by a newline to *fd*; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of *n* to *fd*, with a leading ``-`` when negative."""
    _write_all(fd, str(n).encode("ascii"))