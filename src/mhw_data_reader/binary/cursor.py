"""
Bounded sequential reader over an immutable byte buffer.

All integers are little-endian. Every read checks the remaining length up
front and raises UnexpectedEofError instead of reading past the end.
"""

import struct

from ..errors import InvalidMagicError, UnexpectedEofError

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ByteCursor:
    """Forward-only cursor with typed reads."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self._pos = offset

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise UnexpectedEofError(size, self.remaining, self._pos)
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self) -> int:
        return _U16.unpack(self._take(2))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self._take(4))[0]

    def skip(self, size: int) -> None:
        if size > self.remaining:
            raise UnexpectedEofError(size, self.remaining, self._pos)
        self._pos += size

    def read_cstring(self) -> str:
        """Read a null-terminated string, replacing invalid UTF-8 sequences.

        The terminator is consumed but not included in the result. A run
        with no terminator before the end of the buffer is reported as an
        EOF one byte past what is available.
        """
        null = self._data.find(b"\x00", self._pos)
        if null < 0:
            raise UnexpectedEofError(self.remaining + 1, self.remaining, self._pos)
        raw = self._data[self._pos : null]
        self._pos = null + 1
        return raw.decode("utf-8", errors="replace")

    def expect_tag(self, tag: bytes) -> None:
        """Consume a fixed literal tag, raising InvalidMagicError on mismatch."""
        found = self._take(len(tag))
        if found != tag:
            raise InvalidMagicError(tag, found)
