import pytest

from ecrt.allocator import Allocator, StandardAllocator
from ecrt.error import EcrError, Status


@pytest.fixture
def allocator():
    return StandardAllocator()


def test_alloc_and_free(allocator):
    mem = allocator.allocate(16)
    assert len(mem) == 16
    assert allocator.free(mem) is None


def test_blocks_are_writable_and_distinct(allocator):
    first = allocator.allocate(16)
    second = allocator.allocate(16)
    first[0] = 0xAB
    assert first[0] == 0xAB
    assert second[0] == 0


def test_zero_size(allocator):
    assert len(allocator.allocate(0)) == 0


def test_negative_size_rejected(allocator):
    with pytest.raises(EcrError) as info:
        allocator.allocate(-1)
    assert info.value.status == Status.INVALID_ARGUMENT


def test_standard_version(allocator):
    assert allocator.version == 0


def test_abstract_allocator_cannot_be_created():
    with pytest.raises(TypeError):
        Allocator()