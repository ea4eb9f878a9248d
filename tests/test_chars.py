import string

import pytest

from pushswap.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c)
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c)
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", list(" !@#[]`{}~\t\n-+"))
def test_punctuation_and_space_not_alnum(c):
    assert not is_alnum(c)
    assert not is_alpha(c)
    assert not is_digit(c)


def test_non_ascii_letter_not_alpha():
    assert not is_alpha("é")
    assert not is_ascii("é")


def test_ascii_range_boundaries():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_boundaries():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)
    assert not is_print("\n")


def test_is_print_matches_printable_without_whitespace_controls():
    for code in range(128):
        expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
        assert is_print(code) == expected


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_to_upper_matches_str_upper(c):
    assert to_upper(c) == c.upper()
    assert to_lower(to_upper(c)) == c


@pytest.mark.parametrize("c", list(string.ascii_uppercase))
def test_to_lower_matches_str_lower(c):
    assert to_lower(c) == c.lower()
    assert to_upper(to_lower(c)) == c


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " é"))
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_integer_codes_return_integers():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert is_alpha(ord("z"))


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")