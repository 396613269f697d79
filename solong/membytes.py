"""Byte-buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

import operator

SIZE_MAX = (1 << 64) - 1


def _check_span(buf_len: int, offset: int, length: int) -> None:
    if length < 0 or offset < 0:
        raise ValueError("offset and length must not be negative")
    if offset + length > buf_len:
        raise IndexError(
            f"span of {length} bytes at {offset} exceeds buffer of {buf_len}"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with the low byte of ``value``."""
    _check_span(len(buf), 0, length)
    buf[:length] = bytes([operator.index(value) & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError where the product would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to the low byte of ``value``
    among the first ``length`` bytes, or None."""
    _check_span(len(buf), 0, length)
    index = buf.find(operator.index(value) & 0xFF, 0, length)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_span(len(first), 0, length)
    _check_span(len(second), 0, length)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes of ``src`` to the start of ``dst``."""
    _check_span(len(dst), 0, length)
    _check_span(len(src), 0, length)
    if dst is not src:
        dst[:length] = src[:length]
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    The regions may overlap; the bytes read are those before the copy.
    """
    _check_span(len(buf), src, length)
    _check_span(len(buf), dst, length)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf