"""Integer parsing and formatting, and small min/max helpers.

The parsers follow 32-bit C integer semantics: results wrap to the range of
a signed 32-bit integer, and :func:`atoi` reports overflow of its 64-bit
accumulator the same way its counterpart does.
"""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_BASE = len(_DIGITS)


def _wrap(value: int, bits: int) -> int:
    """Wrap *value* to a signed two's-complement integer of *bits* bits."""
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def atoi(text: str) -> int:
    """Parse a decimal integer from the start of *text*.

    Leading whitespace is skipped, one optional ``+`` or ``-`` sign is
    accepted, and parsing stops at the first non-digit.  Text without
    digits gives 0.  When the 64-bit accumulator overflows the result is 0
    for a negative number and -1 for a positive one; otherwise the value is
    wrapped to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = _wrap(result * 10 + (ord(ch) - ord("0")), 64)
        if result < 0:
            return 0 if negative else -1
    return _wrap(-result if negative else result, 32)


def atoi_base(text: str, base: int) -> int:
    """Parse an integer in *base* from the start of *text*.

    Leading whitespace is skipped and a single ``-`` sign is accepted; a
    ``+`` sign is not.  Digits above 9 are letters in either case.  Parsing
    stops at the first character that is not a digit of *base*.  A base
    below 1 accepts no digits and gives 0.  The result wraps to 32 bits.
    """
    if base > MAX_BASE:
        raise ValueError(f"base must be at most {MAX_BASE}, got {base}")
    valid = _DIGITS[: max(base, 0)]
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        digit = valid.find(ch.lower()) if ch.isascii() else -1
        if digit < 0:
            break
        result = _wrap(result * base + digit, 32)
    return _wrap(result * sign, 32)


def itoa(n: int) -> str:
    """Format *n* as a decimal string with a leading ``-`` when negative."""
    return str(n)


def min_int(a: int, b: int) -> int:
    """Return the smaller of two integers, *a* on a tie."""
    return a if a <= b else b


def max_int(a: int, b: int) -> int:
    """Return the larger of two integers, *a* on a tie."""
    return a if a >= b else b


def min_float(a: float, b: float) -> float:
    """Return the smaller of two floats, *a* on a tie."""
    return a if a <= b else b


def max_float(a: float, b: float) -> float:
    """Return the larger of two floats, *a* on a tie."""
    return a if a >= b else b