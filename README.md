# cstrkit

`cstrkit` offers the classic C string and memory routines for Python. It
keeps C's rules: a string ends at its first NUL character, and results of
comparisons are the difference of the first characters that differ.

## Installation

```
pip install cstrkit
```

## Modules

### `cstrkit.measuring`

Each function takes `str` or bytes-like values and looks only at what comes
before the first NUL.

- `strlen(data)`: number of characters before the NUL.
- `strspn(data, accept)`: length of the leading run of `data` made only of
  characters from `accept`.
- `strcspn(data, reject)`: length of the leading run of `data` holding no
  character from `reject`.

### `cstrkit.comparing`

- `strcmp(first, second)`: compares two NUL-terminated strings (`str` or
  bytes-like). Bytes are read as signed `char` values. If either argument
  is `None` the result is `1`.
- `strncmp(first, second, n)`: compares `n` positions, reading past the end
  of a shorter value as NUL. A negative `n` raises `ValueError`.
- `memcmp(first, second, n)`: compares the first `n` bytes of two bytes-like
  buffers as unsigned values. Text raises `TypeError`; an `n` that is
  negative or longer than either buffer raises `ValueError`.

### `cstrkit.copying`

Destinations are writable buffers such as `bytearray` or a `memoryview`
over one. Each function changes its destination in place and returns it.
A negative count, or a buffer too small for the bytes involved, raises
`ValueError`.

- `memcpy(dest, src, n)`: copies `n` bytes from `src` to the start of `dest`.
- `memmove(dest, src, n)`: the same, and safe when the two overlap.
- `memset(buffer, value, n)`: fills the first `n` bytes with the low byte of
  `value`.
- `strcpy(dest, src)`: copies the string in `src` up to its NUL, and a
  terminating NUL, into `dest`.
- `strncpy(dest, src, n)`: copies at most `n` characters of `src` and pads
  with NUL up to `n`; no terminator is written when `src` has `n` or more
  characters.

## Example

```python
from cstrkit.measuring import strlen, strspn
from cstrkit.comparing import strcmp
from cstrkit.copying import memcpy, strncpy

strlen(b"Hello\0world")           # 5
strspn(b"123abc", b"0123456789")  # 3
strcmp(b"abc", b"abd") < 0        # True

buf = bytearray(b"Hello, world!")
memcpy(buf, b"Good", 4)           # buf is now b"Goodo, world!"

dest = bytearray(8)
strncpy(dest, b"hi", 5)           # first five bytes are b"hi\0\0\0"
```

## What it does not do

The package measures, compares, copies and fills. It has no searching
routines (such as `strchr` or `strstr`), no tokenizer, no concatenation,
and no formatted printing or scanning.

## Running the tests

```
pip install -e ".[test]"
pytest
```