# ftkit

Small, dependency-free utilities with precisely defined edge-case behaviour:
ASCII character classification, integer parsing with 32-bit wrap-around,
byte-buffer operations, string searching and slicing, a singly linked list,
and a chunked line reader over file descriptors.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## `ftkit.chars`

`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `is_space`,
`to_upper` and `to_lower`. Each accepts a one-character string or an integer
character code. Only the ASCII range is classified: letters are `A`-`Z` and
`a`-`z`, whitespace is space, tab, newline, vertical tab, form feed and
carriage return. The case conversions return a value of the same kind they
were given and leave anything that is not an ASCII letter unchanged.

A string longer than one character raises `ValueError`; anything that is
neither a string nor an integer raises `TypeError`.

```python
from ftkit.chars import is_space, to_upper

is_space("\t")        # True
to_upper("q")         # "Q"
to_upper(ord("q"))    # 81
```

## `ftkit.numbers`

- `atoi(text)` skips leading whitespace, accepts one `+` or `-`, and reads
  decimal digits up to the first non-digit. Text without digits gives 0.
  The result wraps to a signed 32-bit integer; if the 64-bit accumulator
  overflows, the result is 0 for a negative number and -1 for a positive one.
- `atoi_base(text, base)` skips leading whitespace, accepts a `-` sign (not
  `+`), and reads digits of `base` in either letter case. A base below 1
  accepts no digits; a base above 36 (`MAX_BASE`) raises `ValueError`. The
  result wraps to 32 bits.
- `itoa(n)` returns the decimal string of `n`.
- `min_int`, `max_int`, `min_float`, `max_float` return the first argument
  on a tie.

```python
from ftkit.numbers import atoi, atoi_base, itoa

atoi("   -42abc")      # -42
atoi_base("ff", 16)    # 255
itoa(-2147483648)      # "-2147483648"
```

## `ftkit.memory`

Writable buffers are `bytearray` or writable `memoryview` objects and are
changed in place; read-only inputs may be any bytes-like object. A negative
count, or one that reaches past the end of a buffer, raises `ValueError`.

- `bzero(buffer, n)` zeroes the first `n` bytes.
- `memset(buffer, value, n)` fills the first `n` bytes with the low byte of
  `value` and returns the buffer.
- `memchr(data, value, n)` returns the index of the first matching byte
  among the first `n`, or `None`.
- `memcmp(first, second, n)` returns 0 when equal, otherwise the difference
  of the first differing unsigned bytes.
- `memcpy(dest, src, n)` copies `n` bytes to the start of `dest` and returns it.
- `memmove(buffer, dest, src, n)` copies `n` bytes inside one buffer from
  offset `src` to offset `dest`; overlapping regions are handled.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`; it raises
  `OverflowError` when the total exceeds a 64-bit size and `ValueError` for
  negative arguments.

## `ftkit.strings`

Searches return an index, or `None` when nothing is found.

- `strlen(s)` — `None` counts as empty.
- `strchr(s, c)`, `strrchr(s, c)` — first and last occurrence; the NUL
  character matches at `len(s)`.
- `strstr(haystack, needle)`, `strnstr(big, little, length)` — an empty
  needle is found at 0; `strnstr` only finds matches lying wholly within the
  first `length` characters.
- `strncmp(first, second, n)` — difference of the first differing character
  codes within `n` characters; a shorter string compares as NUL-padded.
- `strdup(s)`, `substr(s, start, length)`, `strtrim(s, charset)`.
- `strjoin(first, second)` — a `None` side counts as empty; both `None`
  raises `TypeError`.
- `split(s, sep)` — splits on one character and drops empty pieces.
- `strmapi(s, f)` builds a string from `f(index, char)`;
  `striteri(s, f)` calls `f(index, item)` over a mutable sequence and
  replaces each item with a non-`None` return value.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` work on
  NUL-terminated byte strings in a `bytearray`, write at most `size` bytes,
  always terminate the result when `size` is non-zero, and return the length
  of the string they tried to build. A `size` larger than `dst` raises
  `ValueError`.

```python
from ftkit.strings import split, strtrim

split("  a  b c ", " ")   # ["a", "b", "c"]
strtrim("xxhixx", "x")    # "hi"
```

## `ftkit.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and
`putnbr_fd(n, fd)` write UTF-8 text directly to a file descriptor, retrying
short writes. `putstr_fd` and `putendl_fd` write nothing for `None`.
Operating-system errors are raised as `OSError`.

## `ftkit.lists`

`Node(content, next=None)` and `LinkedList(items=())`. A list supports
`push_front(node)`, `push_back(node)` (which attaches the node and any nodes
after it), `last()`, `len()`, iteration over contents, `clear(delete=None)`,
`for_each(func)` and `map(func, delete=None)`. If `func` raises during `map`,
the contents already produced are passed to `delete` and the exception
propagates.

```python
from ftkit.lists import LinkedList, Node

items = LinkedList([1, 2])
items.push_back(Node(3))
list(items)                          # [1, 2, 3]
list(items.map(lambda x: x * 10))    # [10, 20, 30]
```

## `ftkit.linereader`

`LineReader(fd, buffer_size=5)` reads a file descriptor `buffer_size` bytes
at a time and returns one UTF-8 line per `read_line()` call, newline
included, keeping anything read past the newline for the next call. It
returns `None` once the input is exhausted, and iterating over the reader
yields every remaining line. A negative descriptor or a buffer size below 1
raises `ValueError`.

`find_newline(text)` returns the length of the first line in a string or
bytes value, newline included, or 0 when there is no newline.

```python
import os
from ftkit.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 5):
        print(line, end="")
finally:
    os.close(fd)
```

## What it does not do

ftkit is a library only: it installs no command-line program. The line
reader does not open or close descriptors itself, and the output functions
do no buffering.