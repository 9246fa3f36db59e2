"""Status codes and the exception that carries them."""

from __future__ import annotations

import errno
import os
from enum import IntEnum

UNKNOWN_STATUS_STRING = "unknown status code"

_USER_CALL = 0x10
_LOGICAL = 0x20
_IO = 0x40


class Status(IntEnum):
    """Status and error codes."""

    SUCCESS = 0x0
    UNKNOWN = 0x1
    SYSTEM = 0x2

    NOT_SUPPORTED = _USER_CALL + 0x1
    INVALID_ARGUMENT = _USER_CALL + 0x2

    TYPE_OVERFLOW = _LOGICAL + 0x1

    IO = _IO + 0x0
    EOF = _IO + 0x1
    FULL_BUFFER = _IO + 0x2


_MESSAGES = {
    Status.NOT_SUPPORTED: "operation not supported",
    Status.INVALID_ARGUMENT: "invalid argument provided",
    Status.IO: "i/o error",
    Status.EOF: "end of stream reached",
}


def _system_string(errnum: int) -> str:
    if errnum == 0:
        return UNKNOWN_STATUS_STRING
    try:
        text = os.strerror(errnum)
    except ValueError:
        return UNKNOWN_STATUS_STRING
    return text or UNKNOWN_STATUS_STRING


def status_string(status: int, errnum: int = 0) -> str:
    """Return a description of ``status``.

    ``errnum`` is the system error number used when ``status`` is
    :attr:`Status.SYSTEM`.
    """
    if status < 0x10:
        if status == Status.SUCCESS:
            return "success"
        if status == Status.SYSTEM:
            return _system_string(errnum)
        return UNKNOWN_STATUS_STRING
    try:
        return _MESSAGES.get(Status(status), UNKNOWN_STATUS_STRING)
    except ValueError:
        return UNKNOWN_STATUS_STRING


class EcrError(Exception):
    """An operation failed with a non-success status."""

    def __init__(self, status: int, errnum: int = 0) -> None:
        try:
            self.status: int = Status(status)
        except ValueError:
            self.status = status
        self.errnum = errnum
        super().__init__(status_string(status, errnum))

    def __str__(self) -> str:
        return status_string(self.status, self.errnum)


def _errno_map() -> dict[int, Status]:
    pairs = (
        ("EINVAL", Status.INVALID_ARGUMENT),
        ("ENOTSUP", Status.NOT_SUPPORTED),
        ("EIO", Status.IO),
        ("ENOBUFS", Status.FULL_BUFFER),
        ("EOVERFLOW", Status.TYPE_OVERFLOW),
    )
    mapping: dict[int, Status] = {}
    for name, status in pairs:
        code = getattr(errno, name, None)
        if code is not None and code not in mapping:
            mapping[code] = status
    return mapping


_ERRNO_STATUS = _errno_map()


def system_error(exc: OSError) -> EcrError:
    """Convert an :class:`OSError` into an :class:`EcrError`.

    A known error number maps to its own status; anything else becomes
    :attr:`Status.SYSTEM`, keeping the number for its description.
    """
    errnum = exc.errno or 0
    status = _ERRNO_STATUS.get(errnum, Status.SYSTEM)
    return EcrError(status, errnum)


def require_version(version: int, minimum: int) -> None:
    """Raise ``NOT_SUPPORTED`` if ``version`` is below ``minimum``."""
    if version < minimum:
        raise EcrError(Status.NOT_SUPPORTED)