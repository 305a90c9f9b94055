import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    def __init__(self):
        self.read_fd, self.fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self.close_write()
        with os.fdopen(self.read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def close(self):
        self.close_write()
        if self._read_open:
            os.close(self.read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    channel = _Pipe()
    yield channel
    channel.close()


def test_putchar_str(pipe):
    putchar_fd("z", pipe.fd)
    assert pipe.read() == b"z"


def test_putchar_int_uses_low_byte(pipe):
    putchar_fd(ord("A") + 256, pipe.fd)
    assert pipe.read() == b"A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putchar_rejects_other_types():
    with pytest.raises(TypeError):
        putchar_fd(1.5, 1)


def test_putstr_writes_text(pipe):
    putstr_fd("hello world", pipe.fd)
    assert pipe.read() == b"hello world"


def test_putstr_none_writes_nothing(pipe):
    putstr_fd(None, pipe.fd)
    assert pipe.read() == b""


def test_putendl_appends_newline(pipe):
    putendl_fd("line", pipe.fd)
    assert pipe.read() == b"line\n"


def test_putendl_none_writes_nothing(pipe):
    putendl_fd(None, pipe.fd)
    assert pipe.read() == b""


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_putnbr_round_trip(pipe, n):
    putnbr_fd(n, pipe.fd)
    assert int(pipe.read().decode()) == n


def test_putnbr_int_min_text(pipe):
    putnbr_fd(-2147483648, pipe.fd)
    assert pipe.read() == b"-2147483648"


def test_putnbr_zero(pipe):
    putnbr_fd(0, pipe.fd)
    assert pipe.read() == b"0"