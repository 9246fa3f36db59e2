"""Generic byte streams built from a few overridable primitives."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from ecrt.buffer import Buffer
from ecrt.error import EcrError, Status


class StreamDirection(IntEnum):
    """How a position passed to :meth:`Stream.setpos` is applied."""

    SKIP = 0
    REWIND = 1
    START = 2
    END = 3

    @property
    def rewinds(self) -> bool:
        """True if the position moves backward."""
        return bool(self & StreamDirection.REWIND)

    @property
    def anchored(self) -> bool:
        """True if the position is taken from the start or end of the stream."""
        return bool(self & 0b10)


def _ensure(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _note_transferred(exc: EcrError, count: int) -> EcrError:
    exc.transferred = count  # type: ignore[attr-defined]
    return exc


class Stream:
    """An I/O stream.

    Subclasses provide the primitives ``_readbuf``, ``_writebuf``,
    ``_close``, ``_getpos`` and ``_setpos``; any primitive left out raises
    ``NOT_SUPPORTED``.  A primitive may only advance a buffer's position
    (and, when reading, fill its memory).

    When a whole-block operation fails, the raised :class:`EcrError` carries
    the number of bytes moved before the failure as ``transferred``.
    """

    version: int = 0

    def _readbuf(self, buffer: Buffer) -> None:
        raise EcrError(Status.NOT_SUPPORTED)

    def _writebuf(self, buffer: Buffer) -> None:
        raise EcrError(Status.NOT_SUPPORTED)

    def _close(self) -> None:
        raise EcrError(Status.NOT_SUPPORTED)

    def _getpos(self) -> int:
        raise EcrError(Status.NOT_SUPPORTED)

    def _setpos(self, position: int, direction: StreamDirection) -> int:
        raise EcrError(Status.NOT_SUPPORTED)

    @staticmethod
    def _guarded(primitive: Any, buffer: Buffer) -> None:
        memory, capacity, length = buffer.memory, buffer.capacity, buffer.length
        try:
            primitive(buffer)
        finally:
            _ensure(buffer.memory is memory, "stream replaced buffer memory")
            _ensure(buffer.capacity == capacity, "stream changed buffer capacity")
            _ensure(buffer.length == length, "stream changed buffer length")

    def readbuf(self, buffer: Buffer) -> None:
        """Read once into ``buffer``, advancing its position by the bytes read."""
        self._guarded(self._readbuf, buffer)

    def read(self, memory: Any) -> int:
        """Read once into ``memory``; return the number of bytes read."""
        buffer = Buffer.wrap(memory)
        try:
            self.readbuf(buffer)
        except EcrError as exc:
            raise _note_transferred(exc, buffer.position)
        return buffer.position

    def readbuf_full(self, buffer: Buffer) -> None:
        """Read into ``buffer`` until its position reaches its length."""
        if buffer.remaining == 0:
            raise EcrError(Status.FULL_BUFFER)
        while buffer.remaining > 0:
            self.readbuf(buffer)

    def read_full(self, memory: Any) -> int:
        """Fill ``memory`` completely; return the number of bytes read."""
        buffer = Buffer.wrap(memory)
        try:
            self.readbuf_full(buffer)
        except EcrError as exc:
            raise _note_transferred(exc, buffer.position)
        return buffer.position

    def writebuf(self, buffer: Buffer) -> None:
        """Write once from ``buffer``, advancing its position by the bytes written."""
        self._guarded(self._writebuf, buffer)

    def write(self, data: Any) -> int:
        """Write once from ``data``; return the number of bytes written."""
        buffer = Buffer.wrap(data)
        try:
            self.writebuf(buffer)
        except EcrError as exc:
            raise _note_transferred(exc, buffer.position)
        return buffer.position

    def writebuf_full(self, buffer: Buffer) -> None:
        """Write from ``buffer`` until its position reaches its length."""
        if buffer.remaining == 0:
            raise EcrError(Status.FULL_BUFFER)
        while buffer.remaining > 0:
            self.writebuf(buffer)

    def write_full(self, data: Any) -> int:
        """Write all of ``data``; return the number of bytes written."""
        buffer = Buffer.wrap(data)
        try:
            self.writebuf_full(buffer)
        except EcrError as exc:
            raise _note_transferred(exc, buffer.position)
        return buffer.position

    def close(self) -> None:
        """Close the stream."""
        self._close()

    def getpos(self) -> int:
        """Return the stream's current position."""
        return self._getpos()

    def setpos(self, position: int, direction: StreamDirection) -> int:
        """Move the stream and return the resulting position."""
        return self._setpos(position, StreamDirection(direction))

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()