# ftkit

A small toolkit of everyday helpers with no dependencies. Each helper has exact and predictable rules, and those rules also hold in the edge cases.

## Modules

### `ftkit.chars`

ASCII classification and case mapping. Every function takes an integer code point or a one-character string:

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
- `to_upper` and `to_lower` change only ASCII letters. An `int` argument gives an `int` back, and a `str` argument gives a `str` back.

### `ftkit.numbers`

- `atoi(text)` skips leading whitespace. It then reads one optional sign and the digits that follow, up to the first non-digit. Text with no digits gives `0`. If the magnitude goes past the 64-bit range, the result is `-1` for a positive number and `0` for a negative one. Any other result wraps to a signed 32-bit integer.
- `itoa(n)` formats a signed 32-bit integer as text. Any value outside that range raises `OverflowError`.

### `ftkit.memory`

Helpers for `bytearray` buffers. A length or offset that falls outside a buffer raises `ValueError`.

- `calloc(count, size)` returns a zeroed `bytearray`. If the total is above 2³²−1 bytes, it raises `MemoryError`.
- `memset(buf, c, n)` and `bzero(buf, n)` fill the first `n` bytes of `buf`.
- `memcpy(dst, src, n)` copies the first `n` bytes of `src` into `dst`.
- `memmove(dst, dst_offset, src_offset, n)` copies `n` bytes within one buffer. The two ranges may overlap.
- `memchr(data, c, n)` returns the index of the first matching byte, or `None` if there is none.
- `memcmp(a, b, n)` returns the difference at the first byte that differs, or `0` if all match.

### `ftkit.strings`

- `split(s, sep)` splits on a single character and drops empty words.
- `strchr(s, c)` and `strrchr(s, c)` return the index of the first or last match, or `None` if there is none. Searching for `"\0"` returns `len(s)`.
- `strjoin(s1, s2)` concatenates two strings.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` are bounded copy and append into a `bytearray`. Both return the length the full result would have had.
- `strncmp(s1, s2, n)` compares at most `n` characters. A value of `-1` for `n` means there is no limit.
- `strnstr(haystack, needle, length)` finds `needle` only if it lies wholly within the first `length` characters.
- `strtrim(s, charset)` and `substr(s, start, length)` trim a string and take part of it.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(buf, f)` calls `f(index, item)` on each item of a mutable sequence. If `f` returns something other than `None`, that value replaces the item.

### `ftkit.linkedlist`

`LinkedList` is a singly linked list of `Node` objects. It supports:

- `push_front` and `push_back`
- `len()` and iteration
- `last()`, which returns the last node
- `clear(delete)`, which passes each content to `delete`
- `for_each(f)`
- `map(f, delete)`, which returns a new list. If `f` raises, `map` passes the contents built so far to `delete` and lets the error propagate.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to the text stream you pass in. If you pass no stream, they write to standard output. `put_str` and `put_endl` write nothing when given `None`.

### `ftkit.lines`

`LineReader(stream, buffer_size=10)` reads lines, each with its newline, from any object that has a `read(size)` method. It reads at most `buffer_size` units at a time. A text stream gives `str` lines and a binary stream gives `bytes` lines.

- `read_line()` returns `None` once the stream is exhausted.
- The reader can also be iterated.
- A `buffer_size` below 1 raises `ValueError`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Example

```python
import io

from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.linkedlist import LinkedList
from ftkit.lines import LineReader

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  a b  c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"

items = LinkedList(["one", "two"])
items.push_front("zero")
list(items)                # ["zero", "one", "two"]

for line in LineReader(io.StringIO("first\nsecond"), 10):
    print(repr(line))      # 'first\n', then 'second'
```

## Running the tests

```
pytest
```