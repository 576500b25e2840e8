# ftprint

A compact `printf`-style formatter together with small string, memory and
character utilities that follow familiar C library behaviour, written with
ordinary Python values: `str`, `bytearray`, `int` and `None`.

## Installation

```
pip install .
```

## Formatting

`ftprint.printf` understands a fixed set of conversions. A conversion is
`%` followed by exactly one letter; there are no flags, widths or
precisions.

| Conversion | Meaning                                                         |
|------------|-----------------------------------------------------------------|
| `%c`       | one character (a one-character `str`, or an `int`'s low byte)   |
| `%s`       | a string up to its first NUL; `None` gives `(null)`             |
| `%d`, `%i` | a signed decimal, the value taken as a 32-bit int               |
| `%u`       | an unsigned decimal, the value taken as a 32-bit unsigned int   |
| `%x`, `%X` | lower- or upper-case hexadecimal of a 32-bit unsigned value     |
| `%p`       | `0x` and lower-case hex of a 64-bit address; `0`/`None` give `(nil)` |
| `%%`       | a literal percent sign                                          |

Any other character after `%`, or a `%` at the end of the format, raises
`FormatError` (a subclass of `ValueError`). Too few arguments raise
`TypeError`. Text after a NUL in the format is ignored.

```python
from ftprint.printf import FormatError, printf, sprintf

sprintf("%s has %d items (%x)", "box", 42, 255)
# 'box has 42 items (ff)'

count = printf("value: %u\n", -1)   # writes 'value: 4294967295\n' to stdout
# count == 18

sprintf("%p %p", 0, 255)            # '(nil) 0xff'

try:
    sprintf("%q")
except FormatError:
    pass
```

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args,
stream=None)` formats the whole text first, then writes it to `stream`
(`sys.stdout` when none is given) and returns the number of characters
written; on an error nothing is written.

Each conversion is also available on its own: `format_decimal`,
`format_unsigned`, `format_hex(n, upper=False)`, `format_pointer` and
`format_string`. `is_format(c)` tells whether `c` is a supported
conversion letter.

## Utilities

### `ftprint.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return a bool
for an `int` code or a one-character `str`. `to_upper` and `to_lower`
change ASCII letters only and return the same kind of value they were
given.

### `ftprint.memory`

Operations on `bytearray` and bytes-like objects. Counts that are negative
or run past a buffer raise `ValueError`.

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c`;
  `bzero(buf, n)` zeroes them.
- `memcpy(dest, src, n)` copies the first `n` bytes of `src` to the start
  of `dest`.
- `memmove(buf, dest, src, n)` moves `n` bytes within one buffer from
  offset `src` to offset `dest`, overlap allowed.
- `memchr(data, c, n)` returns the index of the byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes,
  or `0`.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`; a size beyond
  `SIZE_MAX` raises `OverflowError`.

### `ftprint.strings`

Strings end at their first NUL. Positions are indexes; `None` means not
found.

- `strlen`, `strchr`, `strrchr` (searching for NUL finds the terminator),
  `strncmp`, `strnstr(big, little, length)`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns `(result_text, attempted_length)`.

### `ftprint.conversion`

- `atoi(text)` skips leading whitespace, accepts one sign and stops at the
  first non-digit; results are narrowed to 32 bits.
- `itoa(n)` gives the decimal text of a 32-bit int; values outside that
  range raise `OverflowError`.

### `ftprint.build`

`strdup`, `substr(s, start, length)`, `strjoin`, `strtrim(s, charset)`,
`split(s, sep)` (non-empty pieces only), `strmapi(s, func)` (builds a new
string from `func(index, char)`), and `striteri(s, func)`, which calls
`func(index, item)` on a list of characters or a `bytearray` and stores any
non-`None` result back in place.

### `ftprint.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to any text stream,
`sys.stdout` by default. `put_str(None)` and `put_endl(None)` write nothing.

```python
from ftprint.build import split, strtrim
from ftprint.conversion import atoi

split("  hello  world ", " ")            # ['hello', 'world']
strtrim("   xxxtripouille   xxx", " x")  # 'tripouille'
atoi("\t\n -06050")                      # -6050
```

## What it does not do

This is a library only: it installs no command-line program. Formatting
covers exactly the conversions listed above, with no field widths,
padding, precision or length modifiers.

## Running the tests

```
pip install .[test]
pytest
```