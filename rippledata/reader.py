"""A reader wrapper that refuses to read past a fixed number of bytes."""

from typing import BinaryIO


class LimitedReader:
    """Read at most ``limit`` bytes from an underlying binary reader."""

    def __init__(self, reader: BinaryIO, limit: int) -> None:
        self._reader = reader
        self._limit = max(limit, 0)

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining if negative); ``b""`` once exhausted."""
        if self._limit <= 0:
            return b""
        if size < 0 or size > self._limit:
            size = self._limit
        data = self._reader.read(size)
        self._limit -= len(data)
        return data

    def read_byte(self) -> int:
        """Read a single byte, raising EOFError when none is left."""
        if self._limit <= 0:
            raise EOFError("limited reader exhausted")
        data = self._reader.read(1)
        if not data:
            raise EOFError("unexpected end of data")
        self._limit -= 1
        return data[0]

    def remaining(self) -> int:
        """Number of bytes that may still be read."""
        return self._limit