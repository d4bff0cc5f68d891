"""Byte-buffer primitives working on bytearrays and other bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(length: int, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    if offset < 0 or offset + n > length:
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {length}"
        )


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken modulo 256)."""
    _check_span(len(buf), n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest."""
    _check_span(len(dest), n)
    _check_span(len(src), n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest; overlap is safe."""
    _check_span(len(buf), n, dest)
    _check_span(len(buf), n, src)
    if n and dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_span(len(data), n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first unequal bytes among the first n, or 0."""
    _check_span(len(a), n)
    _check_span(len(b), n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises MemoryError when the total would overflow the platform size limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)