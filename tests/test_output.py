import os

import pytest
from hypothesis import given, strategies as st

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    read_end, write_end = os.pipe()
    try:
        action(write_end)
    finally:
        os.close(write_end)
    chunks = []
    try:
        while True:
            chunk = os.read(read_end, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(read_end)
    return b"".join(chunks)


def test_putchar_writes_one_character():
    assert _capture(lambda fd: putchar_fd("a", fd)) == b"a"


def test_putchar_rejects_longer_text():
    read_end, write_end = os.pipe()
    try:
        with pytest.raises(ValueError):
            putchar_fd("ab", write_end)
    finally:
        os.close(read_end)
        os.close(write_end)


def test_putstr_writes_text():
    assert _capture(lambda fd: putstr_fd("hello", fd)) == b"hello"


def test_putstr_none_writes_nothing():
    assert _capture(lambda fd: putstr_fd(None, fd)) == b""


def test_putendl_appends_newline():
    assert _capture(lambda fd: putendl_fd("hello", fd)) == b"hello\n"


def test_putendl_none_writes_nothing():
    assert _capture(lambda fd: putendl_fd(None, fd)) == b""


def test_putnbr_most_negative_32_bit():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


def test_putnbr_zero():
    assert _capture(lambda fd: putnbr_fd(0, fd)) == b"0"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_putnbr_parses_back(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n


@given(st.text(max_size=200))
def test_putstr_round_trip(text):
    assert _capture(lambda fd: putstr_fd(text, fd)).decode("utf-8") == text


def test_write_to_closed_descriptor_raises():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    with pytest.raises(OSError):
        putstr_fd("x", write_end)