# printfmt

A compact printf-style formatter. It supports the conversions `%c`, `%s`,
`%p`, `%u`, `%x`, `%X` and `%%`. It handles the flags `#`, `0` and `-`, a
field width and a precision. The package also has a few character, string
and file-descriptor helpers in the classic C-library style.

## Installation

```
pip install printfmt
```

## Formatting

`printfmt.printer.sprintf(fmt, *args)` returns the formatted text.
`printfmt.printer.printf(fmt, *args, file=None)` writes the text to `file`,
or to standard output when no file is given, and returns the number of
characters written.

```python
from printfmt.printer import sprintf, printf

sprintf("%5s|%-4c|", "abc", "z")   # '  abc|z   |'
sprintf("%#x %08X", 255, 48879)    # '0xff 0000BEEF'
sprintf("%.3u", 7)                 # '007'
sprintf("%p", 4096)                # '0x1000'

printf("%s has %u items\n", "cart", 3)
```

How each conversion behaves:

- `%c` takes a one-character string or an int. An int is taken as a byte.
- `%s` takes a string. A precision cuts the string short. `None` prints as
  `(null)`, with no padding.
- `%p` takes an int, or `None`, which prints as `0x0`. It prints `0x`
  followed by lowercase hex.
- `%u`, `%x` and `%X` reduce their argument to a 32-bit unsigned value.
  `#` adds a `0x` or `0X` prefix to a non-zero hex value. `0` pads with
  zeros when no precision is given.
- The `%d` and `%i` conversions are parsed, but they produce no output and
  use up no argument. The ` ` and `+` flags are parsed and then ignored.

If a `%` is followed by an unknown or incomplete conversion, the output
stops at that point. If a conversion needs an argument and none is left,
`TypeError` is raised.

### Lower-level pieces

- `printfmt.spec.parse_spec(text, pos)` reads one conversion specification,
  starting just after the `%`. It returns a `FormatSpec` together with the
  position just past the conversion character. It raises `FormatError`, a
  subclass of `ValueError`, when no valid conversion character follows.
  `FormatSpec` has these fields: `conversion`, `alternate`, `zero_pad`,
  `left_align`, `space`, `plus`, `width`, and `precision`. `precision` is
  `None` when the specification does not give one.
- `printfmt.conversions` provides `format_char`, `format_string`,
  `format_pointer`, `format_unsigned` and `format_hex`. Each one renders a
  single value for a `FormatSpec`. The module also provides `hex_len(n)`
  and `to_hex(n, digits)`.

## Helpers

- `printfmt.chars` has `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `toupper` and `tolower`. They work on ASCII only and accept
  either a single character or an int code.
- `printfmt.strutil` has `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `memcmp`, `memchr` and `strmapi`. `strnstr` and
  `memchr` return an index, or `None` when nothing is found.
- `printfmt.output` has `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`. Each one writes to a raw file descriptor.

```python
from printfmt.strutil import atoi, split, strtrim

atoi("  -42abc")          # -42
split("a,,b,c", ",")      # ['a', 'b', 'c']
strtrim("xxhixx", "x")    # 'hi'
```

## What it does not do

This is a library only and has no command-line tool. It does not format
signed decimals (`%d`, `%i`), floating-point numbers or octal.

## Running the tests

```
pip install printfmt[test]
pytest
```