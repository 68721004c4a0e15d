from contextlib import contextmanager
from typing import Iterator, Optional

from pyedid.exceptions import EdidParseError, MagicMismatchError, UnexpectedEndError


class ByteReader:
    """
    Forward-only cursor over an immutable byte buffer.

    A reader may be a window onto a larger buffer (see :meth:`window`); positions
    reported in errors are always absolute offsets into the original buffer.
    """

    def __init__(self, data: bytes, start: int = 0, end: Optional[int] = None):
        self._data = bytes(data)
        self._end = len(self._data) if end is None else end
        self.position = start

    @property
    def remaining(self) -> int:
        return self._end - self.position

    def _require(self, count: int):
        if count > self.remaining:
            raise UnexpectedEndError(count, self.remaining, self.position)

    def peek(self, count: int) -> bytes:
        self._require(count)
        return self._data[self.position:self.position + count]

    def take(self, count: int) -> bytes:
        chunk = self.peek(count)
        self.position += count
        return chunk

    def skip(self, count: int):
        self._require(count)
        self.position += count

    def rest(self) -> bytes:
        chunk = self._data[self.position:self._end]
        self.position = self._end
        return chunk

    def window(self, count: int) -> "ByteReader":
        """Consume ``count`` bytes and return a reader confined to them."""
        self._require(count)
        sub = ByteReader(self._data, self.position, self.position + count)
        self.position += count
        return sub

    def u8(self) -> int:
        return self.take(1)[0]

    def le_u16(self) -> int:
        return int.from_bytes(self.take(2), byteorder="little")

    def be_u16(self) -> int:
        return int.from_bytes(self.take(2), byteorder="big")

    def le_u32(self) -> int:
        return int.from_bytes(self.take(4), byteorder="little")

    def tag(self, expected: bytes) -> bytes:
        start = self.position
        actual = self._data[start:min(start + len(expected), self._end)]
        if actual != expected:
            raise MagicMismatchError(expected, actual, start)
        self.position += len(expected)
        return actual

    @contextmanager
    def context(self, label: str) -> Iterator["ByteReader"]:
        # Annotate failures raised inside the block with the stage name.
        try:
            yield self
        except EdidParseError as error:
            error.add_context(label)
            raise
