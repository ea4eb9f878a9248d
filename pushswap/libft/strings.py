"""Searching, comparing and bounded copying of NUL-terminated text."""

from __future__ import annotations

from itertools import zip_longest

NUL = "\0"


def _cstr(s: str) -> str:
    """Return the text up to the first NUL, as a C string would see it."""
    return s.split(NUL, 1)[0]


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue=NUL)
    for count, (a, b) in enumerate(pairs):
        if count >= n:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` wholly within the first ``length`` characters of ``haystack``."""
    hay = _cstr(haystack)
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = hay.find(wanted, 0, max(0, min(length, len(hay))))
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize``; return the copy and the length of ``src``."""
    text = _cstr(src)
    if dstsize <= 0:
        return "", len(text)
    return text[: dstsize - 1], len(text)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``dstsize``; return the result and the
    length the full concatenation would have had."""
    head = _cstr(dst)
    tail = _cstr(src)
    if dstsize <= len(head):
        return head, len(tail) + dstsize
    room = dstsize - 1 - len(head)
    return head + tail[:room], len(tail) + len(head)