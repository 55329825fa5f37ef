"""Byte-buffer helpers: allocation, filling, copying, searching, comparing."""

from __future__ import annotations

from typing import Optional

_UINT32_MAX = 2**32 - 1


def _check_span(name: str, buf, offset: int, n: int) -> None:
    if n < 0 or offset < 0:
        raise ValueError(f"negative length or offset for {name}")
    if offset + n > len(buf):
        raise ValueError(
            f"{name} holds {len(buf)} bytes, cannot reach {offset + n}"
        )


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises MemoryError when the total exceeds the 32-bit unsigned limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _UINT32_MAX:
        raise MemoryError(f"refusing to allocate {total} bytes")
    return bytearray(total)


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_span("buffer", buf, 0, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf; return buf."""
    return memset(buf, 0, n)


def memcpy(dst: bytearray, src, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dst; return dst."""
    if dst is src:
        return dst
    _check_span("destination", dst, 0, n)
    _check_span("source", src, 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(dst: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within dst from src_offset to dst_offset, overlap allowed."""
    _check_span("source", dst, src_offset, n)
    _check_span("destination", dst, dst_offset, n)
    if dst_offset != src_offset:
        dst[dst_offset:dst_offset + n] = bytes(dst[src_offset:src_offset + n])
    return dst


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_span("data", data, 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch."""
    _check_span("first buffer", a, 0, n)
    _check_span("second buffer", b, 0, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)