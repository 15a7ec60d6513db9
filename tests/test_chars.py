import string

import pytest

from wirefdf.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


@pytest.mark.parametrize("ch", ["@", "[", "`", "{", "/", ":", " "])
def test_boundaries_are_not_alnum(ch):
    assert is_alpha(ch) is False
    assert is_digit(ch) is False
    assert is_alnum(ch) is False


def test_ascii_range_limits():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_limits():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_printable_is_subset_of_ascii():
    for code in range(-5, 300):
        if is_print(code):
            assert is_ascii(code)
        if is_alnum(code):
            assert is_print(code)


def test_to_upper_and_lower_str():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("5") == "5"
    assert to_lower("!") == "!"


def test_to_upper_int_keeps_int():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch
    assert to_upper(ch) != ch
    assert is_alpha(to_upper(ch))


def test_non_letters_unchanged_by_case():
    for code in range(0, 256):
        if not is_alpha(code):
            assert to_upper(code) == code
            assert to_lower(code) == code


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)