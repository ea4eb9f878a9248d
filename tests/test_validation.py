import pytest

from pushswap.libft.strops import split
from pushswap.validation import (
    check_valid_args,
    has_duplicates,
    is_valid_int,
    join_all_args,
)


@pytest.mark.parametrize(
    "text",
    ["42", "0", "-0", "+7", "-2147483648", "2147483647", "\t5", "  12", "007"],
)
def test_is_valid_int_accepts(text):
    assert is_valid_int(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "+", "-", "2147483648", "-2147483649", "12a", "1 2", "--1", "+-3", "abc", "99999999999999999999"],
)
def test_is_valid_int_rejects(text):
    assert is_valid_int(text) is False


def test_has_duplicates_detects_equal_values():
    assert has_duplicates(["1", "01"]) is True
    assert has_duplicates(["0", "-0"]) is True
    assert has_duplicates(["+3", "3"]) is True


def test_has_duplicates_distinct_values():
    assert has_duplicates(["1", "2", "-1"]) is False
    assert has_duplicates([]) is False


def test_join_all_args_prefixes_each_with_space():
    joined = join_all_args(["1", "2 3"])
    assert joined.startswith(" ")
    assert split(joined, " ") == ["1", "2", "3"]


def test_join_all_args_empty():
    assert join_all_args([]) == ""


def test_check_valid_args_accepts_mixed_forms():
    assert check_valid_args(["3 2 1"]) is True
    assert check_valid_args(["3", "-2", "+1"]) is True


@pytest.mark.parametrize(
    "args",
    [[], [""], ["   "], ["1", "1"], ["1", "a"], ["1 2 2"], ["2147483648"], ["1\t2"]],
)
def test_check_valid_args_rejects(args):
    assert check_valid_args(args) is False