"""Character classification and case conversion on single characters or codes.

Every function takes either a one-character string or an integer character
code. The classifiers return a non-zero flag when the character belongs to
the class and 0 otherwise.
"""

from __future__ import annotations

ALNUM_FLAG = 8
ALPHA_FLAG = 1024
ASCII_FLAG = 1
DIGIT_FLAG = 2048
PRINT_FLAG = 16384

_CASE_OFFSET = 32


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def _is_decimal(code: int) -> bool:
    return 48 <= code <= 57


def is_alnum(c: int | str) -> int:
    """Return ALNUM_FLAG for an ASCII letter or digit, else 0."""
    code = _code(c)
    if _is_decimal(code) or _is_upper(code) or _is_lower(code):
        return ALNUM_FLAG
    return 0


def is_alpha(c: int | str) -> int:
    """Return ALPHA_FLAG for an ASCII letter, else 0."""
    code = _code(c)
    return ALPHA_FLAG if _is_upper(code) or _is_lower(code) else 0


def is_ascii(c: int | str) -> int:
    """Return ASCII_FLAG for a code in 0..127, else 0."""
    return ASCII_FLAG if 0 <= _code(c) <= 127 else 0


def is_digit(c: int | str) -> int:
    """Return DIGIT_FLAG for a decimal digit, else 0."""
    return DIGIT_FLAG if _is_decimal(_code(c)) else 0


def is_print(c: int | str) -> int:
    """Return PRINT_FLAG for a printable ASCII character (32..126), else 0."""
    return PRINT_FLAG if 32 <= _code(c) <= 126 else 0


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital; other characters are returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; other characters are returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code