"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

_C = TypeVar("_C", str, int)


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def isalpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: _C) -> _C:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code += ord("A") - ord("a")
    return chr(code) if isinstance(c, str) else code


def tolower(c: _C) -> _C:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code