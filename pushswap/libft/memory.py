"""Byte-buffer filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Union

Bytes = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(buf: Bytes, offset: int, length: int) -> None:
    if offset < 0 or length < 0:
        raise ValueError("offset and length must not be negative")
    if offset + length > len(buf):
        raise IndexError(
            f"span {offset}..{offset + length} exceeds buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low 8 bits)."""
    _check_span(buf, 0, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes; a zero total allocates one byte."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} overflows the allocation size")
    return bytearray(max(total, 1))


def memchr(data: Bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (low 8 bits) in the first ``n`` bytes."""
    _check_span(data, 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(dst, 0, n)
    _check_span(src, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(
    buf: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Copy ``length`` bytes within ``buf``; overlapping regions are handled."""
    _check_span(buf, dst_offset, length)
    _check_span(buf, src_offset, length)
    buf[dst_offset : dst_offset + length] = bytes(
        buf[src_offset : src_offset + length]
    )
    return buf