"""Rendering of individual conversions as strings."""

from __future__ import annotations

from .spec import FormatSpec

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULLONG_MASK = (1 << 64) - 1


def hex_len(n: int) -> int:
    """Number of hexadecimal digits needed for ``n`` (at least one)."""
    n &= _ULLONG_MASK
    return max(1, (n.bit_length() + 3) // 4)


def to_hex(n: int, digits: str = LOWER_HEX) -> str:
    """Render ``n`` in base 16 using the given digit alphabet."""
    n &= _ULLONG_MASK
    out = []
    while True:
        n, digit = divmod(n, 16)
        out.append(digits[digit])
        if not n:
            break
    return "".join(reversed(out))


def _justify(spec: FormatSpec, body: str) -> str:
    if spec.left_align:
        return body.ljust(spec.width)
    return body.rjust(spec.width)


def format_char(spec: FormatSpec, c: str | int) -> str:
    """Render a ``%c`` conversion."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    return _justify(spec, c)


def format_string(spec: FormatSpec, s: str | None) -> str:
    """Render a ``%s`` conversion; ``None`` prints as ``(null)`` unpadded."""
    if s is None:
        return "(null)"
    if spec.precision is not None:
        s = s[: spec.precision]
    return _justify(spec, s)


def format_pointer(spec: FormatSpec, p: int | None) -> str:
    """Render a ``%p`` conversion as ``0x`` followed by lowercase hex."""
    value = 0 if p is None else p & _ULLONG_MASK
    return _justify(spec, "0x" + to_hex(value, LOWER_HEX))


def _estimated_dec_len(n: int) -> int:
    # Field-width estimate used for padding: the count advances while
    # n // 10 is non-zero but n shrinks by a factor of 16 each step,
    # so values of three or more digits are under-counted.
    length = 1
    while n // 10:
        length += 1
        n //= 16
    return length


def _padding(spec: FormatSpec, field_len: int) -> str:
    pad = max(0, spec.width - field_len)
    fill = "0" if spec.zero_pad and spec.precision is None else " "
    return fill * pad


def _dec_body(spec: FormatSpec, n: int) -> str:
    if spec.precision == 0 and n == 0:
        return ""
    zeros = 0
    if spec.precision is not None:
        zeros = max(0, spec.precision - _estimated_dec_len(n))
    return "0" * zeros + str(n)


def format_unsigned(spec: FormatSpec, n: int) -> str:
    """Render a ``%u`` conversion of a 32-bit unsigned value."""
    n &= _UINT_MASK
    body = _dec_body(spec, n)
    if spec.left_align:
        return body.ljust(spec.width)
    field_len = _estimated_dec_len(n)
    if spec.precision is not None and field_len < spec.precision:
        field_len = spec.precision
    if spec.precision == 0 and n == 0:
        field_len = 0
    return _padding(spec, field_len) + body


def _hex_body(spec: FormatSpec, n: int) -> str:
    if spec.precision == 0 and n == 0:
        return ""
    upper = spec.conversion != "x"
    prefix = ""
    if spec.alternate and n != 0:
        prefix = "0X" if upper else "0x"
    zeros = 0
    if spec.precision is not None:
        zeros = max(0, spec.precision - hex_len(n))
    return prefix + "0" * zeros + to_hex(n, UPPER_HEX if upper else LOWER_HEX)


def format_hex(spec: FormatSpec, n: int) -> str:
    """Render a ``%x`` or ``%X`` conversion of a 32-bit unsigned value."""
    n &= _UINT_MASK
    body = _hex_body(spec, n)
    if spec.left_align:
        return body.ljust(spec.width)
    field_len = hex_len(n)
    if spec.precision is not None and field_len < spec.precision:
        field_len = spec.precision
    if spec.alternate and n != 0:
        field_len += 2
    if spec.precision == 0 and n == 0:
        field_len = 0
    # Zero padding goes in front of the "0x" prefix.
    return _padding(spec, field_len) + body