"""Buffers used by I/O operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ecrt.allocator import Allocator
from ecrt.error import EcrError, Status


@dataclass
class Buffer:
    """A memory block with a lower (``position``) and upper (``length``) mark.

    ``position`` must never exceed ``length``, and ``length`` never exceed
    ``capacity``.
    """

    memory: Any
    capacity: int
    position: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.position <= self.length <= self.capacity:
            raise EcrError(Status.INVALID_ARGUMENT)

    @classmethod
    def allocate(cls, allocator: Allocator, capacity: int) -> Buffer:
        """Allocate an empty buffer of ``capacity`` bytes."""
        memory = allocator.allocate(capacity)
        return cls(memory=memory, capacity=capacity)

    @classmethod
    def wrap(cls, memory: Any) -> Buffer:
        """Wrap existing memory as a buffer spanning all of it."""
        size = memoryview(memory).nbytes
        return cls(memory=memory, capacity=size, position=0, length=size)

    def free(self, allocator: Allocator) -> None:
        """Release the memory through ``allocator`` and reset the buffer."""
        allocator.free(self.memory)
        self.memory = None
        self.capacity = 0
        self.position = 0
        self.length = 0

    @property
    def remaining(self) -> int:
        """Bytes between ``position`` and ``length``."""
        return self.length - self.position

    @property
    def pending(self) -> memoryview:
        """View of the bytes between ``position`` and ``length``."""
        if self.memory is None:
            return memoryview(b"")
        return memoryview(self.memory).cast("B")[self.position:self.length]

    def consumed(self) -> bytes:
        """Bytes before ``position``."""
        if self.memory is None:
            return b""
        return bytes(memoryview(self.memory).cast("B")[: self.position])