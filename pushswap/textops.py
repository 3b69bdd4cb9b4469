"""Building, cutting and transforming NUL-terminated strings.

As in ``pushswap.cstring``, every string argument is read up to its first
NUL character.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableSequence

from .cstring import strdup

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUL = "\0"


def _separator(sep: int | str) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    return chr(sep % 256)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return strdup(s)[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    return strdup(s).strip(strdup(chars))


def _words(text: str, sep: str) -> Iterator[str]:
    for word in text.split(sep):
        if word:
            yield word


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    separator = _separator(sep)
    text = strdup(s)
    if separator == _NUL:
        return [text] if text else []
    return list(_words(text, separator))


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(strdup(s)))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace, in place, every character before the first NUL by ``f(index, char)``."""
    for index, char in enumerate(s):
        if char == _NUL:
            break
        s[index] = f(index, char)