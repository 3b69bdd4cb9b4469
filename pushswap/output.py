"""Formatted output to text streams and to raw file descriptors.

The stream functions write to ``out`` (standard output when omitted) and
return the number of characters written. Integers are taken with the
width of a 32-bit C ``int``: signed values wrap into the signed range and
unsigned values into 0..2**32-1.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import Any, TextIO

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_CONVERSIONS = frozenset("cspdiuxX%")
_UINT32 = 1 << 32
_UINT64 = 1 << 64
_NUL = "\0"


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c % 256)


def _to_int32(n: int) -> int:
    n %= _UINT32
    return n - _UINT32 if n >= _UINT32 >> 1 else n


def _to_uint32(n: int) -> int:
    return n % _UINT32


def _in_base(n: int, digits: str) -> str:
    radix = len(digits)
    text = digits[n % radix]
    while n >= radix:
        n //= radix
        text = digits[n % radix] + text
    return text


def put_char(c: int | str, out: TextIO | None = None) -> int:
    """Write one character and return 1."""
    _stream(out).write(_char(c))
    return 1


def put_str(s: str | None, out: TextIO | None = None) -> int:
    """Write ``s`` up to its first NUL, or ``(null)`` for None; return the length."""
    text = NULL_STRING if s is None else _cstr(s)
    _stream(out).write(text)
    return len(text)


def put_nbr(n: int, out: TextIO | None = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return put_str(str(_to_int32(n)), out)


def put_nbr_u(n: int, out: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in decimal."""
    return put_str(str(_to_uint32(n)), out)


def put_nbr_base(n: int, base: str, out: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer with ``base`` as its digits.

    A base of fewer than two digits writes nothing and returns 0.
    """
    digits = _cstr(base)
    if len(digits) < 2:
        return 0
    return put_str(_in_base(_to_uint32(n), digits), out)


def put_address(address: int | None, out: TextIO | None = None) -> int:
    """Write an address as ``0x`` and lower-case hex, or ``(nil)`` for 0 or None."""
    if not address:
        return put_str(NULL_POINTER, out)
    return put_str("0x" + _in_base(address % _UINT64, HEX_LOWER), out)


def _convert(spec: str, args: Iterator[Any], out: TextIO | None) -> int:
    if spec == "%":
        return put_char("%", out)
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return put_char(arg, out)
    if spec == "s":
        return put_str(arg, out)
    if spec in "di":
        return put_nbr(arg, out)
    if spec == "u":
        return put_nbr_u(arg, out)
    if spec == "x":
        return put_nbr_base(arg, HEX_LOWER, out)
    if spec == "X":
        return put_nbr_base(arg, HEX_UPPER, out)
    return put_address(arg, out)


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args``; return the count.

    Supported conversions are ``%c %s %d %i %u %x %X %p %%``. A ``%`` followed
    by anything else is written as it stands.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    text = _cstr(fmt)
    count = 0
    chars = iter(text)
    for ch in chars:
        if ch != "%":
            count += put_char(ch, out)
            continue
        spec = next(chars, None)
        if spec in _CONVERSIONS:
            count += _convert(spec, values, out)
        else:
            count += put_char("%", out)
            if spec is not None:
                count += put_char(spec, out)
    return count


def _write_fd(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: int | str, fd: int) -> None:
    """Write one character to a file descriptor."""
    ch = _char(c)
    code = ord(ch)
    _write_fd(fd, bytes([code]) if code < 256 else ch.encode("utf-8"))


def put_str_fd(s: str, fd: int) -> None:
    """Write ``s`` up to its first NUL to a file descriptor."""
    _write_fd(fd, _cstr(s).encode("utf-8"))


def put_endl_fd(s: str, fd: int) -> None:
    """Write ``s`` and a newline to a file descriptor."""
    _write_fd(fd, (_cstr(s) + "\n").encode("utf-8"))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write a signed 32-bit integer in decimal to a file descriptor."""
    put_str_fd(str(_to_int32(n)), fd)