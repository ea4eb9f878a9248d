"""Building, slicing and converting text: duplication, joining, trimming,
splitting and integer conversion."""

from __future__ import annotations

import re
from itertools import count
from typing import Callable, MutableSequence

from pushswap.libft.strings import NUL, _cstr

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def strdup(s: str) -> str:
    """Return a copy of the text up to its terminating NUL."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two texts."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    text = _cstr(s)
    chars = _cstr(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in _cstr(s).split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits.

    Parsing stops at the first character that is not a digit; text without
    digits gives 0.
    """
    match = _LEADING_NUMBER.match(_cstr(text))
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new text from ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(_cstr(s)))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Apply ``func(index, char)`` to each character of ``s`` in place.

    A returned character replaces the current one; ``None`` keeps it.
    Iteration stops at the end of the sequence or at the first NUL.
    """
    for index in count():
        if index >= len(s) or s[index] == NUL:
            return
        replacement = func(index, s[index])
        if replacement is not None:
            s[index] = replacement