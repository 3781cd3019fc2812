import os
import tempfile

import pytest
from hypothesis import given
from hypothesis import strategies as st

from basekit.reader import LineReader, read_lines


def _fd_with(data: bytes) -> int:
    handle, path = tempfile.mkstemp()
    os.write(handle, data)
    os.close(handle)
    fd = os.open(path, os.O_RDONLY)
    os.unlink(path)
    return fd


def test_lines_keep_newline():
    fd = _fd_with(b"first\nsecond\nthird")
    try:
        reader = LineReader(fd, 4)
        assert reader.read_line() == "first\n"
        assert reader.read_line() == "second\n"
        assert reader.read_line() == "third"
        assert reader.read_line() is None
        assert reader.read_line() is None
    finally:
        os.close(fd)


def test_empty_input_gives_none():
    fd = _fd_with(b"")
    try:
        assert LineReader(fd).read_line() is None
    finally:
        os.close(fd)


def test_blank_lines_are_kept():
    fd = _fd_with(b"\n\nx\n")
    try:
        assert list(LineReader(fd, 1)) == ["\n", "\n", "x\n"]
    finally:
        os.close(fd)


def test_read_lines_generator():
    fd = _fd_with(b"a\nb\n")
    try:
        assert list(read_lines(fd)) == ["a\n", "b\n"]
    finally:
        os.close(fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_bad_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(0, size)


def test_closed_descriptor_raises():
    fd = _fd_with(b"data\n")
    os.close(fd)
    reader = LineReader(fd)
    with pytest.raises(OSError):
        reader.read_line()


@given(st.text(), st.integers(min_value=1, max_value=64))
def test_lines_rebuild_input(text, size):
    data = text.encode("utf-8", errors="surrogatepass")
    fd = _fd_with(data)
    try:
        lines = list(LineReader(fd, size))
    finally:
        os.close(fd)
    rebuilt = "".join(lines).encode("utf-8", errors="surrogateescape")
    assert rebuilt == data
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert "\n" not in line[:-1]
    assert all(line for line in lines)
    assert len(lines) == data.count(b"\n") + (0 if data.endswith(b"\n") or not data else 1)