"""Byte-buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

from collections.abc import Sequence

Buffer = bytearray | bytes | memoryview


def _check_span(name: str, data: Sequence[int] | Buffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span("buffer", buf, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_span("buffer", buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memcpy(dst: bytearray | None, src: Buffer | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``.

    When both buffers are missing, nothing is copied and None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("both buffers are required")
    _check_span("source", src, n)
    _check_span("destination", dst, n)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: Buffer, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including the first byte ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dst`` just past the
    copied ``c``, or None when ``c`` did not occur within ``n`` bytes.
    """
    stop = bytes(src[:n]).find(bytes([c & 0xFF]))
    count = n if stop < 0 else stop + 1
    _check_span("source", src, count)
    _check_span("destination", dst, count)
    dst[:count] = bytes(src[:count])
    return None if stop < 0 else count


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span("buffer", buf, max(dst_offset, src_offset) + n)
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: Buffer, c: int, n: int) -> int | None:
    """Return the offset of the first byte ``c`` within the first ``n`` bytes, or None."""
    _check_span("buffer", data, n)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span("first buffer", a, n)
    _check_span("second buffer", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0