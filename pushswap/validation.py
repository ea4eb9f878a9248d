"""Checking command-line arguments before they are turned into a stack."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.strops import INT_MAX, INT_MIN, atoi, split

_WHITESPACE = " \t\n\v\f\r"


def is_valid_int(text: str) -> bool:
    """True when ``text`` is an optionally signed decimal that fits in 32 bits.

    Leading whitespace is allowed; anything after the digits is not.
    """
    body = text.lstrip(_WHITESPACE)
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]
    if not body or not all(is_digit(char) for char in body):
        return False
    value = int(body)
    if negative:
        return -value >= INT_MIN
    return value <= INT_MAX


def has_duplicates(tokens: Sequence[str]) -> bool:
    """True when two tokens parse to the same integer."""
    values = [atoi(token) for token in tokens]
    return len(set(values)) != len(values)


def join_all_args(args: Iterable[str]) -> str:
    """Join the arguments into one text, each preceded by a space."""
    return "".join(" " + arg for arg in args)


def check_valid_args(args: Iterable[str]) -> bool:
    """True when the arguments hold at least one integer, all valid and distinct."""
    tokens = split(join_all_args(args), " ")
    if not tokens:
        return False
    if not all(is_valid_int(token) for token in tokens):
        return False
    return not has_duplicates(tokens)