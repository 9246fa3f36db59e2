"""Streams over operating-system file descriptors."""

from __future__ import annotations

import os
import sys
from functools import lru_cache

from ecrt.buffer import Buffer
from ecrt.error import EcrError, Status, system_error
from ecrt.stream import Stream, StreamDirection

_SSIZE_MAX = sys.maxsize
_OFF_MAX = 2**63 - 1
_OFF_MIN = -(2**63)
_POS_MAX = 2**64 - 1


class FdStream(Stream):
    """A stream that uses a file descriptor it does not duplicate."""

    def __init__(self, fd: int) -> None:
        self._fd = fd

    def fileno(self) -> int:
        """Return the underlying file descriptor."""
        return self._fd

    def _readbuf(self, buffer: Buffer) -> None:
        length = buffer.remaining
        if length <= 0:
            raise EcrError(Status.FULL_BUFFER)
        length = min(length, _SSIZE_MAX)
        try:
            data = os.read(self._fd, length)
        except OSError as exc:
            raise system_error(exc) from exc
        if not data:
            raise EcrError(Status.EOF)
        buffer.pending[: len(data)] = data
        buffer.position += len(data)

    def _writebuf(self, buffer: Buffer) -> None:
        length = buffer.remaining
        if length <= 0:
            raise EcrError(Status.FULL_BUFFER)
        length = min(length, _SSIZE_MAX)
        try:
            written = os.write(self._fd, buffer.pending[:length])
        except OSError as exc:
            raise system_error(exc) from exc
        buffer.position += written

    def _close(self) -> None:
        try:
            os.close(self._fd)
        except OSError as exc:
            raise system_error(exc) from exc

    def _getpos(self) -> int:
        try:
            offset = os.lseek(self._fd, 0, os.SEEK_CUR)
        except OSError as exc:
            raise system_error(exc) from exc
        if not 0 <= offset <= _POS_MAX:
            raise EcrError(Status.TYPE_OVERFLOW)
        return offset

    def _setpos(self, position: int, direction: StreamDirection) -> int:
        if not 0 <= position <= _POS_MAX:
            raise EcrError(Status.TYPE_OVERFLOW)
        offset = -position if direction.rewinds else position
        if not _OFF_MIN <= offset <= _OFF_MAX:
            raise EcrError(Status.TYPE_OVERFLOW)

        if direction.anchored:
            whence = os.SEEK_END if direction.rewinds else os.SEEK_SET
        else:
            whence = os.SEEK_CUR

        try:
            result = os.lseek(self._fd, offset, whence)
        except OSError as exc:
            raise system_error(exc) from exc
        if not 0 <= result <= _POS_MAX:
            raise EcrError(Status.TYPE_OVERFLOW)
        return result

    def __repr__(self) -> str:
        return f"FdStream(fd={self._fd})"


def from_fd(fd: int) -> FdStream:
    """Return a stream over a duplicate of ``fd``."""
    try:
        duplicate = os.dup(fd)
    except OSError as exc:
        raise system_error(exc) from exc
    return FdStream(duplicate)


@lru_cache(maxsize=None)
def stdin_stream() -> FdStream:
    """Return the stream for standard input."""
    return FdStream(0)


@lru_cache(maxsize=None)
def stdout_stream() -> FdStream:
    """Return the stream for standard output."""
    return FdStream(1)


@lru_cache(maxsize=None)
def stderr_stream() -> FdStream:
    """Return the stream for standard error."""
    return FdStream(2)