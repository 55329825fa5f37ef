"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer contributes its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    _target(stream).write(itoa(n))