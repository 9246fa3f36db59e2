import pytest

from ecrt.allocator import Allocator, StandardAllocator
from ecrt.buffer import Buffer
from ecrt.error import EcrError, Status


class _Failing(Allocator):
    def allocate(self, size):
        raise EcrError(Status.SYSTEM)

    def free(self, mem):
        raise EcrError(Status.IO)


def test_allocate_sets_fields():
    buf = Buffer.allocate(StandardAllocator(), 32)
    assert buf.capacity == 32
    assert len(buf.memory) == 32
    assert (buf.position, buf.length) == (0, 0)
    assert buf.remaining == 0


def test_free_resets():
    buf = Buffer.allocate(StandardAllocator(), 8)
    buf.free(StandardAllocator())
    assert buf.memory is None
    assert (buf.capacity, buf.position, buf.length) == (0, 0, 0)


def test_free_failure_keeps_buffer():
    buf = Buffer.allocate(StandardAllocator(), 8)
    with pytest.raises(EcrError) as info:
        buf.free(_Failing())
    assert info.value.status == Status.IO
    assert buf.capacity == 8


def test_allocate_failure_propagates():
    with pytest.raises(EcrError) as info:
        Buffer.allocate(_Failing(), 8)
    assert info.value.status == Status.SYSTEM


def test_wrap_spans_memory():
    data = b"hello"
    buf = Buffer.wrap(data)
    assert buf.capacity == len(data)
    assert buf.length == len(data)
    assert buf.position == 0
    assert bytes(buf.pending) == data


def test_pending_and_consumed_follow_position():
    data = bytearray(b"abcdef")
    buf = Buffer.wrap(data)
    buf.position = 2
    assert bytes(buf.pending) == b"cdef"
    assert buf.consumed() == b"ab"
    assert buf.remaining == len(data) - 2


def test_invalid_marks_rejected():
    with pytest.raises(EcrError) as info:
        Buffer(memory=bytearray(4), capacity=4, position=3, length=2)
    assert info.value.status == Status.INVALID_ARGUMENT
    with pytest.raises(EcrError):
        Buffer(memory=bytearray(4), capacity=4, position=0, length=5)