"""String and byte-buffer helpers with C library semantics."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

_LLONG_MAX = 9223372036854775807
_LLONG_MIN = -9223372036854775807 - 1


def _to_int32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def atoi(text: str) -> int:
    """Convert the leading decimal number in ``text`` to a 32-bit int.

    Leading whitespace and one sign are skipped; parsing stops at the first
    non-digit.  Values outside the 64-bit range saturate before being
    narrowed to 32 bits, as a C cast would.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "+":
        stripped = stripped[1:]
    elif stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    value = min(max(value, _LLONG_MIN), _LLONG_MAX)
    return _to_int32(value)


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0; ``None`` means not found.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the result's sign orders the strings."""
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def _check_length(data: bytes | bytearray | memoryview, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if len(data) < n:
        raise ValueError(f"buffer of {len(data)} bytes is shorter than {n}")


def memcmp(
    b1: bytes | bytearray | memoryview, b2: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first ``n`` bytes; the result's sign orders the buffers."""
    _check_length(b1, n)
    _check_length(b2, n)
    for a, b in zip(bytes(b1[:n]), bytes(b2[:n])):
        if a != b:
            return a - b
    return 0


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (as unsigned char) in ``n`` bytes."""
    _check_length(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results."""
    return "".join(func(i, ch) for i, ch in enumerate(text))