"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

from ftkit.chars import is_digit

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Text with no digits yields 0. A magnitude
    beyond the 64-bit range gives -1 for a positive number and 0 for a
    negative one; otherwise the result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in takewhile(is_digit, rest):
        value = value * 10 + (ord(ch) - 48)
        if negative and -value < _LLONG_MIN:
            return 0
        if not negative and value > _LLONG_MAX:
            return -1
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer as decimal text."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)