# miniprintf

A small printf-style formatter. It understands a fixed set of conversions.
It can return the formatted text or write it to a stream.

The package needs nothing beyond the standard library. The optional `test`
extra adds pytest for running the test suite.

## Conversions

| Spec      | Argument                        | Output                                          |
|-----------|---------------------------------|-------------------------------------------------|
| `%c`      | a one-character `str` or an int | the character; an int is taken modulo 256       |
| `%s`      | a `str` or `None`               | the text up to any NUL, or `(null)` for `None`  |
| `%p`      | an int address or `None`        | `0x` and lowercase hex; `None` gives `0x0`      |
| `%d` `%i` | an int                          | decimal, wrapped to a 32-bit signed value       |
| `%u`      | an int                          | decimal, wrapped to a 32-bit unsigned value     |
| `%x` `%X` | an int                          | lower / upper case hex of the 32-bit unsigned value |
| `%%`      | none                            | a literal `%`                                   |

Other rules:

- A `%` followed by any other character gives that character, and it uses no
  argument.
- A `%` as the last character of the format is output as is.
- The format ends at its first NUL character, if it has one.
- Unused extra arguments are ignored.
- Too few arguments raise `TypeError`.
- A bad `%c` argument raises `ValueError` for a string that is not one
  character long, and `TypeError` for a value that is not an int or a string.

## Usage

```python
from miniprintf.printf import format_text, printf

format_text("%s has %d items (%x)", "box", 42, 255)
# 'box has 42 items (ff)'

format_text("%d %u", -1, -1)
# '-1 4294967295'

count = printf("%c%c%%\n", "o", "k")   # writes "ok%\n" to stdout, returns 4
```

`printf(form, *args, stream=None)` writes to standard output unless it is given
a keyword-only `stream` with a `write` method. It returns the number of
characters written.

The single conversions are in `miniprintf.conversions`:

```python
from miniprintf.conversions import (
    format_char, format_hex, format_int, format_unsigned,
    format_pointer, format_string,
)

format_char(65)              # 'A'
format_int(-2147483648)      # '-2147483648'
format_int(2147483648)       # '-2147483648'
format_unsigned(-1)          # '4294967295'
format_hex(3735928559, "X")  # 'DEADBEEF'
format_pointer(None)         # '0x0'
format_pointer(255)          # '0xff'
format_string(None)          # '(null)'
```

`format_hex` raises `ValueError` when `case` is anything other than `"x"` or
`"X"`.

## What it does not do

- There are no flags, field widths, precisions or length modifiers. For
  example, `%5d` gives `5d`, because `%5` outputs the `5`.
- There are no floating-point conversions.
- The package is a library only and installs no command-line program.