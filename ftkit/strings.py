"""String helpers: searching, comparing, slicing, trimming and splitting.

Most functions work on ordinary ``str`` values. Positions come back as
indices, and ``None`` means "not found". The two bounded-copy helpers,
:func:`strlcpy` and :func:`strlcat`, work on NUL-terminated byte strings
held in a ``bytearray`` and change it in place.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Iterable, MutableSequence, Optional, TypeVar, Union

from ftkit.memory import BytesLike, memcpy

Char = Union[str, int]
T = TypeVar("T")

_NUL = "\0"


def _as_char(c: Char) -> str:
    """Return *c* as a one-character string; integer codes keep their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _cstrlen(data: Iterable[int]) -> int:
    """Length of a NUL-terminated byte string, or the whole buffer if it has no NUL."""
    raw = bytes(data)
    end = raw.find(0)
    return len(raw) if end < 0 else end


def strlen(s: Optional[str]) -> int:
    """Return the length of *s*; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first *c* in *s*, or ``None``.

    The NUL character matches the end of the string, so it gives ``len(s)``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last *c* in *s*, or ``None``.

    The NUL character matches the end of the string, so it gives ``len(s)``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a string equal to *s*."""
    return "".join(s)


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a ``None`` side counts as empty.

    Raises :class:`TypeError` when both sides are ``None``.
    """
    if first is None and second is None:
        raise TypeError("at least one of the strings to join must be given")
    return (first or "") + (second or "")


def _check_size(dst: bytearray, size: int) -> None:
    _check_non_negative(size, "size")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds destination buffer of {len(dst)} bytes")


def strlcpy(dst: Optional[bytearray], src: Optional[BytesLike], size: int) -> int:
    """Copy the byte string *src* into *dst*, writing at most *size* bytes.

    At most ``size - 1`` bytes are copied and the result is always
    NUL-terminated when *size* is not zero. Returns the length of *src*, so
    a return value of *size* or more means the copy was truncated. When
    either buffer is ``None`` nothing is copied and 0 is returned.
    """
    if dst is None or src is None:
        return 0
    src_len = _cstrlen(src)
    _check_non_negative(size, "size")
    if size == 0:
        return src_len
    _check_size(dst, size)
    count = min(src_len, size - 1)
    memcpy(dst, src, count)
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append the byte string *src* to the NUL-terminated string in *dst*.

    *size* is the full size of the destination, terminator included; the
    result is truncated to fit and NUL-terminated. Returns the length of
    the string it tried to build. When *size* is no larger than the current
    string in *dst*, nothing is written and ``size + len(src)`` is returned.
    """
    _check_non_negative(size, "size")
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    _check_size(dst, size)
    dest_len = _cstrlen(dst)
    if size <= dest_len:
        return size + src_len
    count = src_len if size - dest_len > src_len else size - dest_len - 1
    with memoryview(dst) as view:
        memcpy(view[dest_len:], src, count)
    dst[dest_len + count] = 0
    return dest_len + src_len


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns 0 when they match, otherwise the difference between the codes
    of the first differing characters; a shorter string compares as if
    padded with NUL.
    """
    _check_non_negative(n, "n")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find *little* lying wholly within the first *length* characters of *big*.

    An empty *little* is found at index 0. Returns ``None`` when there is
    no match.
    """
    _check_non_negative(length, "length")
    index = big[:length].find(little)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the first *needle* in *haystack*, or ``None``.

    An empty *needle* is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    if s is None or charset is None:
        raise TypeError("both the string and the character set must be given")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* beginning at *start*.

    A *start* at or past the end gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def split(s: str, sep: Char) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    return [part for part in s.split(_as_char(sep)) if part]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, character)`` for each character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` on each item of *s*, in place.

    A value returned by *f* replaces the item; ``None`` leaves it as it is.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement