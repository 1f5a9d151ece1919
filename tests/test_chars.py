import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ascii_chars = st.characters(max_codepoint=127)
any_chars = st.characters()


@given(ascii_chars)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@given(ascii_chars)
def test_is_digit_matches_decimal_digits(c):
    assert is_digit(c) == (c in string.digits)


@given(ascii_chars)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


@given(any_chars)
def test_is_ascii_matches_str_isascii(c):
    assert is_ascii(c) == c.isascii()


@given(ascii_chars)
def test_is_print_matches_isprintable_in_ascii(c):
    assert is_print(c) == c.isprintable()


@given(any_chars)
def test_is_space_only_the_six_whitespace_characters(c):
    assert is_space(c) == (c in " \t\n\v\f\r")


@given(st.characters(min_codepoint=128))
def test_non_ascii_is_never_classified(c):
    assert not (is_alpha(c) or is_digit(c) or is_print(c) or is_space(c))


@given(st.integers(min_value=-1000, max_value=-1))
def test_negative_codes_are_not_ascii(code):
    assert is_ascii(code) is False


@given(st.integers(min_value=0, max_value=127))
def test_integer_codes_agree_with_characters(code):
    c = chr(code)
    assert is_alpha(code) == is_alpha(c)
    assert is_print(code) == is_print(c)
    assert is_space(code) == is_space(c)


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_to_upper_lowercase_letters(c):
    assert to_upper(c) == c.upper()
    assert to_lower(to_upper(c)) == c


@pytest.mark.parametrize("c", list(string.ascii_uppercase))
def test_to_lower_uppercase_letters(c):
    assert to_lower(c) == c.lower()
    assert to_upper(to_lower(c)) == c


@given(any_chars.filter(lambda ch: ch not in string.ascii_letters))
def test_case_conversion_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_conversion_on_integer_codes():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_non_ascii_letters_are_not_converted():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_string_rejected(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)


def test_non_character_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)