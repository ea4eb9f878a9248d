"""Writing characters, text and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.libft.strings import _cstr
from pushswap.libft.strops import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write the text up to its terminating NUL."""
    _target(stream).write(_cstr(s))


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write the text followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(n))