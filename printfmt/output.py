"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str | int, fd: int) -> None:
    """Write a single character to ``fd``; an int is written as one byte."""
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
    else:
        _write_all(fd, c.encode())


def putstr_fd(text: str | None, fd: int) -> None:
    """Write ``text`` to ``fd``; ``None`` writes nothing."""
    if text is None:
        return
    _write_all(fd, text.encode())


def putendl_fd(text: str | None, fd: int) -> None:
    """Write ``text`` and a newline to ``fd``; ``None`` writes nothing."""
    if text is None:
        return
    _write_all(fd, text.encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write ``n`` in decimal to ``fd``."""
    _write_all(fd, str(n).encode())