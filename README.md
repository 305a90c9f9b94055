# ftkit

Small helpers that follow the semantics of the classic C library routines,
working on plain Python values: ints, strings, bytes and bytearrays.

## Modules

- `ftkit.chars`: ASCII character classes and case mapping. Each function
  takes an integer code or a one-character string (`is_alnum`, `is_alpha`,
  `is_ascii`, `is_digit`, `is_print`, `to_lower`, `to_upper`). The case
  converters return the same kind of value they were given.
- `ftkit.memory`: byte-buffer operations (`bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`, `memset`). Modifying functions work in
  place on a `bytearray`; ranges outside a buffer raise `ValueError`.
  `memmove` copies between two offsets of one buffer and handles overlap.
- `ftkit.convert`: `atoi` and `itoa`. `atoi` skips leading whitespace, reads
  one optional sign and the digits that follow; a value beyond the 64-bit
  range gives `-1` (positive) or `0` (negative), otherwise the result is
  wrapped to a 32-bit signed int.
- `ftkit.text`: string routines (`split`, `strchr`, `strrchr`, `strdup`,
  `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`,
  `strncmp`, `strnstr`, `strtrim`, `substr`). Searches return an index or
  `None`. `strlcpy` and `strlcat` return a `BoundedString` holding the
  resulting `text` and the reported `length`, which reveals truncation.
- `ftkit.linkedlist`: a singly linked list. `Node` holds `content` and
  `next`; `LinkedList` offers `push_front`, `push_back`, `last`, `clear`,
  `iterate`, `map`, `len()` and iteration over contents.
- `ftkit.output`: writers to file descriptors (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`). Strings are written as UTF-8; `None` writes
  nothing.
- `ftkit.printf`: a small formatter supporting `%c %s %p %d %i %u %x %X %%`
  with no flags, widths or precisions. `format_string` returns the text;
  `printf` writes it to standard output and returns its length. Also
  `to_hex`, `format_pointer` and `format_unsigned`. `%s` with `None`
  gives `(null)`; unknown conversions produce nothing.
- `ftkit.nextline`: `LineReader`, which reads a file descriptor in chunks of
  `buffer_size` bytes (default 1) and returns one line at a time as
  `bytes`, newline included.

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.text import split, strlcpy, strtrim
from ftkit.printf import format_string
from ftkit.linkedlist import LinkedList

atoi("   -42abc")             # -42
itoa(-2147483648)             # "-2147483648"
split("  a b  c ", " ")       # ["a", "b", "c"]
strtrim("xxhixx", "x")        # "hi"
strlcpy("", "hello", 3)       # BoundedString(text="he", length=5)
format_string("%d is %x", 255, 255)   # "255 is ff"

items = LinkedList([1, 2, 3])
len(items)                    # 3
list(items.map(lambda v: v * 2, None))   # [2, 4, 6]
```

Reading lines from a file descriptor:

```python
import os
from ftkit.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 32):
    print(line.decode("utf-8"), end="")
os.close(fd)
```

`read_line()` returns `None` once the input is exhausted; read errors
propagate as `OSError`.

## What it does not do

ftkit is a library only: it installs no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```