"""Opening files as streams."""

from __future__ import annotations

import os
from enum import IntFlag

from ecrt.error import EcrError, Status, system_error
from ecrt.fd import FdStream

_ACCESS_MODE_MASK = 0xFF
_ACCESS_MODE_RDWR_MASK = 0b11
_CREATE_PERMISSIONS = 0o600


class FileMode(IntFlag):
    """File access mode flags."""

    READ_ONLY = 1 << 0
    WRITE_ONLY = 1 << 1
    READ_WRITE = READ_ONLY | WRITE_ONLY
    APPEND = 1 << 2
    CREATE = 1 << 8


def _open_flags(mode: int) -> int:
    access = mode & _ACCESS_MODE_RDWR_MASK
    if access == FileMode.READ_ONLY:
        flags = os.O_RDONLY
    elif access == FileMode.WRITE_ONLY:
        flags = os.O_WRONLY
    elif access == FileMode.READ_WRITE:
        flags = os.O_RDWR
    else:
        raise EcrError(Status.INVALID_ARGUMENT)

    if mode & FileMode.APPEND:
        if not access & FileMode.WRITE_ONLY:
            raise EcrError(Status.INVALID_ARGUMENT)
        flags |= os.O_APPEND

    if mode & FileMode.CREATE:
        flags |= os.O_CREAT

    return flags | getattr(os, "O_BINARY", 0)


def open_file(pathname: str | os.PathLike[str], mode: int) -> FdStream:
    """Open ``pathname`` as a stream.

    ``mode`` must hold one of the read-only, write-only or read-write access
    modes; ``APPEND`` additionally requires write access.  Files created
    through ``CREATE`` are readable and writable by their owner only.
    """
    flags = _open_flags(int(mode))
    try:
        if flags & os.O_CREAT:
            fd = os.open(pathname, flags, _CREATE_PERMISSIONS)
        else:
            fd = os.open(pathname, flags)
    except OSError as exc:
        raise system_error(exc) from exc
    return FdStream(fd)