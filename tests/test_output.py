import os

import pytest

from printfmt.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    def __init__(self):
        self._read_fd, self.fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self.close_write()
        with os.fdopen(self._read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def close(self):
        self.close_write()
        if self._read_open:
            os.close(self._read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    try:
        yield p
    finally:
        p.close()


def test_putchar_str(pipe):
    putchar_fd("A", pipe.fd)
    assert pipe.read() == b"A"


def test_putchar_int_is_one_byte(pipe):
    putchar_fd(ord("z"), pipe.fd)
    putchar_fd(0x141, pipe.fd)
    data = pipe.read()
    assert data[:1] == b"z"
    assert len(data) == 2


def test_putstr(pipe):
    putstr_fd("hello", pipe.fd)
    assert pipe.read() == b"hello"


def test_putstr_none_writes_nothing(pipe):
    putstr_fd(None, pipe.fd)
    assert pipe.read() == b""


def test_putendl_appends_newline(pipe):
    putendl_fd("line", pipe.fd)
    assert pipe.read() == b"line\n"


def test_putendl_none_writes_nothing(pipe):
    putendl_fd(None, pipe.fd)
    assert pipe.read() == b""


@pytest.mark.parametrize("n", [0, 9, -9, 1234, 2147483647, -2147483648])
def test_putnbr_round_trip(pipe, n):
    putnbr_fd(n, pipe.fd)
    assert int(pipe.read().decode()) == n


def test_writes_to_file(tmp_path):
    path = tmp_path / "out.txt"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT)
    try:
        putstr_fd("ab", fd)
        putchar_fd("c", fd)
        putendl_fd("", fd)
    finally:
        os.close(fd)
    assert path.read_bytes() == b"abc\n"