"""String helpers: splitting, searching, bounded copies, comparison, trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Normalise a search character; integers keep only their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def split(s: str, sep: str) -> List[str]:
    """Split s on the single character sep, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string, len(s).
    """
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string, len(s).
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strjoin(s1: str, s2: str) -> str:
    """Return a new string holding s1 followed by s2."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strlcpy(dst: bytearray, src: bytes, size: int) -> int:
    """Replace dst with at most size - 1 bytes of src; return len(src).

    A size of -1 means no limit. Any other size below 1 leaves dst alone.
    """
    if not isinstance(dst, bytearray):
        raise TypeError("destination must be a bytearray")
    data = bytes(src)
    if size == -1:
        size = len(data) + 1
    elif size < 1:
        return len(data)
    dst[:] = data[: size - 1]
    return len(data)


def strlcat(dst: bytearray, src: bytes, size: int) -> int:
    """Append src to dst so that dst stays below size bytes.

    Returns the length the full concatenation would have had. When size
    does not exceed the current length of dst, dst is left unchanged and
    len(src) + size is returned.
    """
    if not isinstance(dst, bytearray):
        raise TypeError("destination must be a bytearray")
    if size < 0:
        raise ValueError("size must not be negative")
    data = bytes(src)
    dest_len = len(dst)
    if size <= dest_len:
        return len(data) + size
    dst.extend(data[: size - dest_len - 1])
    return dest_len + len(data)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the stop.

    A count of -1 means no limit; any other count below 1 compares nothing.
    A NUL character ends a string early.
    """
    if n < 1 and n != -1:
        return 0
    limit = None if n == -1 else n
    for x, y in zip_longest(s1[:limit], s2[:limit], fillvalue=_NUL):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle wholly inside the first length characters of haystack.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove every character in charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call f(index, item) for each item of buf, in place.

    When f returns something other than None, it replaces the item.
    """
    for index, item in enumerate(buf):
        replacement = f(index, item)
        if replacement is not None:
            buf[index] = replacement