"""Byte-buffer operations: filling, searching, comparing and copying.

Writable buffers are ``bytearray`` objects or writable byte
``memoryview``s. They are changed in place. Read-only inputs may be any
bytes-like object. A count that is negative, or that reaches past the end
of a buffer, raises :class:`ValueError` rather than touching memory it
does not own.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_count(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > length:
        raise ValueError(f"{what} holds {length} bytes, cannot use {n}")


def _check_span(length: int, offset: int, n: int, what: str) -> None:
    if offset < 0:
        raise ValueError(f"{what} offset must not be negative, got {offset}")
    if offset + n > length:
        raise ValueError(
            f"{what} span of {n} bytes at offset {offset} exceeds buffer of {length} bytes"
        )


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first *n* bytes of *buffer* to zero."""
    _check_count(len(buffer), n, "buffer")
    buffer[:n] = bytes(n)


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first *n* bytes of *buffer* with the low byte of *value*."""
    _check_count(len(buffer), n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of *value*.

    Only the first *n* bytes are searched. Returns ``None`` if the byte is
    not among them.
    """
    _check_count(len(data), n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first *n* bytes of two buffers as unsigned bytes.

    Returns 0 when they are equal. Otherwise the result is the difference
    between the first pair of bytes that differ.
    """
    _check_count(len(first), n, "first buffer")
    _check_count(len(second), n, "second buffer")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy the first *n* bytes of *src* to the start of *dest*."""
    _check_count(len(dest), n, "destination")
    _check_count(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy *n* bytes inside *buffer* from offset *src* to offset *dest*.

    The two regions may overlap. The result is as if the source bytes had
    first been copied aside.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    _check_span(len(buffer), src, n, "source")
    _check_span(len(buffer), dest, n, "destination")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes each.

    Raises :class:`OverflowError` when the total size does not fit in a
    64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"{nmemb} elements of {size} bytes exceed the maximum size")
    return bytearray(total)