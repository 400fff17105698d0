# libft

A small library of character, byte-buffer and string helpers. They behave
like the classic C standard routines and a few common extras built on them,
but take and return ordinary Python values. Strings are `str` and buffers
are `bytearray`. Searches return an index or `None`, and errors are raised
as exceptions.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Modules

### `libft.ctype`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each takes an integer character code or a one-character string.

- The `is_*` functions return `bool` and only recognise the ASCII range.
- `to_upper` and `to_lower` return the same kind of value they were given.

### `libft.memory`

`memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` and `memcmp`.

- The functions that write take a `bytearray` or a writable `memoryview`.
  The functions that only read take any bytes-like object.
- A length past the end of a buffer raises `IndexError`. A negative length
  raises `ValueError`.
- `memchr` returns an offset or `None`.
- `memcmp` returns the difference of the first pair of bytes that differ.

### `libft.cstr`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
`atoi` and `strdup`.

- Strings are read up to their first `"\0"`, as a NUL-terminated string
  would be.
- The search functions return an index or `None`.
- `strlcpy` and `strlcat` return a tuple `(text, needed_length)`.
- `atoi` skips leading whitespace, reads an optional sign and digits, and
  wraps the result like a 32-bit int.

### `libft.strtools`

`substr`, `strjoin`, `strtrim`, `split`, `itoa`, `strmapi` and `striteri`.

- `split` drops empty pieces.
- `itoa` accepts only values that fit a 32-bit signed int and raises
  `OverflowError` otherwise.
- `striteri` calls `f(index, seq)` on a mutable sequence of characters, so
  the callback can change it in place.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to an open
file descriptor with `os.write`. Passing `None` to `putstr_fd` or
`putendl_fd` writes nothing.

## Examples

```python
from libft.cstr import atoi, strlen, strchr, strlcpy
from libft.strtools import split, itoa, strtrim
from libft.memory import calloc, memset

atoi("   -42abc")          # -42
strlen("hello")            # 5
strchr("hello", "l")       # 2
strlcpy("", "hello", 3)    # ('he', 5)
split("  a b  c ", " ")    # ['a', 'b', 'c']
itoa(-2147483648)          # '-2147483648'
strtrim("xxhixx", "x")     # 'hi'

buf = calloc(4, 2)         # bytearray of 8 zero bytes
memset(buf, ord("A"), 3)   # buf now starts with b"AAA"
```

```python
import sys
from libft.output import putendl_fd, putnbr_fd

putendl_fd("done", sys.stdout.fileno())
putnbr_fd(-123, 1)
```

## What it does not do

This is a library only. It has no command-line program, and it does not
manage raw memory. Buffers are ordinary Python objects, so there is nothing
to allocate or free by hand beyond what `calloc` returns.

## Running the tests

```
pytest
```