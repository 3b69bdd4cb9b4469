"""Byte-buffer operations on ``bytes``, ``bytearray`` and ``memoryview``.

Functions that write take a writable buffer and change it in place. Asking
for more bytes than a buffer holds raises ValueError.
"""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check(buffer, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buffer):
        raise ValueError(f"{what} holds {len(buffer)} bytes, {n} requested")


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check(buf, n, "buffer")
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb`` elements of ``size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("requested size overflows")
    return bytearray(nmemb * size)


def memchr(block, c: int, size: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``size`` bytes."""
    _check(block, size, "block")
    index = bytes(block[:size]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, size: int) -> int:
    """Compare ``size`` bytes; return the difference of the first pair that differs."""
    _check(a, size, "first block")
    _check(b, size, "second block")
    for x, y in zip(bytes(a[:size]), bytes(b[:size])):
        if x != y:
            return x - y
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    _check(dest, n, "destination")
    _check(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes like memcpy, correct even when the buffers overlap."""
    _check(dest, n, "destination")
    _check(src, n, "source")
    data = bytes(src[:n])
    dest[:n] = data
    return dest


def memset(buf, value: int, count: int):
    """Fill the first ``count`` bytes of ``buf`` with the low byte of ``value``."""
    _check(buf, count, "buffer")
    buf[:count] = bytes([value & 0xFF]) * count
    return buf