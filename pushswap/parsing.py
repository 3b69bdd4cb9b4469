"""Validation and conversion of the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_ARGUMENT_LENGTH = 11

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_ARGUMENT = re.compile(r"-?[0-9]*")


class InputError(ValueError):
    """An argument list the program refuses, with the exit status to report."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.exit_status = exit_status


def _parse_leading(text: str, bits: int) -> int:
    """Read an optionally signed decimal prefix, wrapping like a ``bits``-wide integer."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    modulus = 1 << bits
    value = 0
    for digit in digits:
        value = (value * 10 + int(digit)) % modulus
    if sign == "-":
        value = -value % modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Convert the leading number of ``text`` to a 32-bit signed integer.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Values outside the 32-bit range wrap around.
    """
    return _parse_leading(text, 32)


def atol(text: str) -> int:
    """Convert the leading number of ``text`` to a 64-bit signed integer."""
    return _parse_leading(text, 64)


def validate_arguments(args: Iterable[str]) -> None:
    """Raise InputError unless every argument is a plain integer that fits in 32 bits."""
    args = list(args)
    for arg in args:
        if not _ARGUMENT.fullmatch(arg):
            raise InputError(f"not an integer: {arg!r}")
    for arg in args:
        if len(arg) > MAX_ARGUMENT_LENGTH:
            raise InputError(f"argument too long: {arg!r}")
        if not INT_MIN <= atol(arg) <= INT_MAX:
            raise InputError(f"out of range: {arg!r}")


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate the arguments and return their values in order.

    Repeated values raise InputError with exit status 3.
    """
    args = list(args)
    validate_arguments(args)
    values = [atoi(arg) for arg in args]
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value: {value}", exit_status=3)
        seen.add(value)
    return values