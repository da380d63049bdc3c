"""Parsing of a single conversion specification such as ``%-08.3x``."""

from __future__ import annotations

import re
from dataclasses import dataclass

FLAG_CHARS = "#0- +"
CONVERSION_CHARS = "cspdiuxX%"

_SPEC_RE = re.compile(r"(?P<flags>[#0\- +]*)(?P<width>\d*)(?:\.(?P<precision>\d*))?")


class FormatError(ValueError):
    """Raised when a conversion specification cannot be parsed."""


@dataclass
class FormatSpec:
    """Flags, width, precision and conversion character of one specification.

    ``precision`` is ``None`` when the specification gives none.
    """

    conversion: str
    alternate: bool = False
    zero_pad: bool = False
    left_align: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int | None = None


def parse_spec(text: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the specification starting at ``pos`` (just past the ``%``).

    Returns the parsed spec and the index just past the conversion character.
    Raises FormatError if no valid conversion character follows.
    """
    match = _SPEC_RE.match(text, pos)
    # The pattern can match the empty string, so a match always exists.
    assert match is not None
    end = match.end()
    if end >= len(text):
        raise FormatError(f"incomplete conversion specification at index {pos}")
    conversion = text[end]
    if conversion not in CONVERSION_CHARS:
        raise FormatError(f"unknown conversion character {conversion!r} at index {end}")

    flags = match.group("flags")
    width_digits = match.group("width")
    precision_digits = match.group("precision")

    if precision_digits is None:
        precision = None
    else:
        precision = int(precision_digits) if precision_digits else 0

    spec = FormatSpec(
        conversion=conversion,
        alternate="#" in flags,
        zero_pad="0" in flags,
        left_align="-" in flags,
        space=" " in flags,
        plus="+" in flags,
        width=int(width_digits) if width_digits else 0,
        precision=precision,
    )
    return spec, end + 1