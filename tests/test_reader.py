import io

import pytest

from rippledata.reader import LimitedReader


def test_read_stops_at_limit():
    reader = LimitedReader(io.BytesIO(b"abcdef"), 4)
    assert reader.read(10) == b"abcd"
    assert reader.remaining() == 0
    assert reader.read(1) == b""


def test_read_all_remaining():
    reader = LimitedReader(io.BytesIO(b"abcdef"), 3)
    assert reader.read() == b"abc"


def test_read_byte_counts_down():
    reader = LimitedReader(io.BytesIO(b"xyz"), 2)
    assert reader.read_byte() == b"x"[0]
    assert reader.remaining() == 1
    assert reader.read_byte() == b"y"[0]
    with pytest.raises(EOFError):
        reader.read_byte()


def test_read_byte_underlying_exhausted():
    reader = LimitedReader(io.BytesIO(b""), 5)
    with pytest.raises(EOFError):
        reader.read_byte()


def test_underlying_reader_left_positioned_after_limit():
    source = io.BytesIO(b"abcdef")
    reader = LimitedReader(source, 2)
    reader.read(5)
    assert source.read() == b"cdef"