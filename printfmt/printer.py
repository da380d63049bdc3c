"""Formatted output built from conversion specifications."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .conversions import (
    format_char,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)
from .spec import FormatError, FormatSpec, parse_spec

_CONSUMING = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "u": format_unsigned,
    "x": format_hex,
    "X": format_hex,
}


def _convert(spec: FormatSpec, values: Iterator[Any]) -> str:
    if spec.conversion == "%":
        return "%"
    render = _CONSUMING.get(spec.conversion)
    if render is None:
        # Accepted by the parser but not rendered; no argument is consumed.
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for %{spec.conversion} conversion"
        ) from None
    return render(spec, value)


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    """Yield the output pieces; stop silently at an invalid specification."""
    values = iter(args)
    pos = 0
    while pos < len(fmt):
        pct = fmt.find("%", pos)
        if pct == -1:
            yield fmt[pos:]
            return
        if pct > pos:
            yield fmt[pos:pct]
        try:
            spec, pos = parse_spec(fmt, pct + 1)
        except FormatError:
            return
        yield _convert(spec, values)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result.

    Output ends at the first specification that cannot be parsed.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    out = sys.stdout if file is None else file
    written = 0
    for piece in _render(fmt, args):
        if piece:
            out.write(piece)
            written += len(piece)
    return written