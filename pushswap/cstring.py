"""Operations on NUL-terminated strings, expressed over Python ``str``.

A string is read up to its first NUL character, as a C string would be.
Positions are returned as indices, and a missing match as ``None``.
"""

from __future__ import annotations

_NUL = "\0"


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c % 256)


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the terminator at ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, the terminator included."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters; return the difference of the first mismatch."""
    if length <= 0:
        return 0
    a = _cstr(first)[:length]
    b = _cstr(second)[:length]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    # One side ended first: compare its terminator with the other character.
    return ord(a[len(b)]) if len(a) > len(b) else -ord(b[len(a)])


def strnstr(big: str, little: str, size: int) -> int | None:
    """Find ``little`` wholly within the first ``size`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    needle = _cstr(little)
    if not needle:
        return 0
    if size <= 0:
        return None
    index = _cstr(big).find(needle, 0, size)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the buffer's new contents and the full length of ``src``.
    With ``size`` 0 the buffer is left as it was.
    """
    source = _cstr(src)
    if size <= 0:
        return dst, len(source)
    return source[: size - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, NUL included.

    Returns the buffer's new contents and the length the result would have
    had with room enough: ``len(src)`` when ``size`` is 0, ``size + len(src)``
    when ``size`` is smaller than ``dst``, else ``len(dst) + len(src)``.
    """
    target = _cstr(dst)
    source = _cstr(src)
    if size <= 0:
        return target, len(source)
    if size < len(target):
        return target, size + len(source)
    room = max(size - 1 - len(target), 0)
    return target + source[:room], len(target) + len(source)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _cstr(s)