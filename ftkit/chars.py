"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer
character code.  Characters outside the ASCII range are never classified
as letters, digits, printable or whitespace, and are left untouched by the
case conversions.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_WHITESPACE_CODES = frozenset({ord(" "), 9, 10, 11, 12, 13})
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: Char) -> int:
    """Return the integer code of a character given as a string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _code(c) in _WHITESPACE_CODES


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return _same_kind(c, code)