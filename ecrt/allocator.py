"""Memory allocators."""

from __future__ import annotations

import errno
from abc import ABC, abstractmethod

from ecrt.error import EcrError, Status


class Allocator(ABC):
    """A source of memory blocks."""

    version: int = 0

    @abstractmethod
    def allocate(self, size: int) -> bytearray:
        """Return a new block of ``size`` bytes."""

    @abstractmethod
    def free(self, mem: bytearray | None) -> None:
        """Release a block; may succeed even if ``mem`` was not allocated here."""


class StandardAllocator(Allocator):
    """Allocator backed by ordinary Python byte arrays."""

    def allocate(self, size: int) -> bytearray:
        if size < 0:
            raise EcrError(Status.INVALID_ARGUMENT)
        try:
            return bytearray(size)
        except MemoryError as exc:
            raise EcrError(Status.SYSTEM, errno.ENOMEM) from exc

    def free(self, mem: bytearray | None) -> None:
        """Release the storage held by ``mem``; anything else is accepted as is."""
        if isinstance(mem, bytearray):
            mem.clear()