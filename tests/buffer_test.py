import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapkit.datastructures.buffer import GrowableBuffer
from heapkit.errors import InvalidCapacityError


def test_capacity_and_slot_access():
    buf = GrowableBuffer(3)
    assert buf.capacity == 3
    assert len(buf) == 3
    buf[0] = "a"
    buf[2] = "c"
    assert buf[0] == "a"
    assert buf[2] == "c"


def test_out_of_range_slot_raises_index_error():
    buf = GrowableBuffer(2)
    with pytest.raises(IndexError):
        buf[2] = 1
    with pytest.raises(IndexError):
        buf[-1]


def test_zero_capacity_is_legal():
    buf = GrowableBuffer(0)
    assert buf.capacity == 0
    buf.grow(10)
    assert buf.capacity == 10
    buf[9] = 42
    assert buf[9] == 42


def test_negative_capacity_rejected():
    with pytest.raises(InvalidCapacityError):
        GrowableBuffer(-1)
    # Also usable as a plain ValueError.
    with pytest.raises(ValueError):
        GrowableBuffer(-5)


def test_non_int_capacity_rejected():
    with pytest.raises(TypeError):
        GrowableBuffer(2.5)


def test_grow_preserves_contents_and_adds_fixed_increment():
    buf = GrowableBuffer(4)
    for i in range(4):
        buf[i] = i * 10
    buf.grow(10)
    assert buf.capacity == 14
    assert [buf[i] for i in range(4)] == [0, 10, 20, 30]


def test_unwritten_slots_read_as_none_across_growth():
    buf = GrowableBuffer(3)
    buf[0] = "x"
    assert buf[1] is None
    buf.grow(2)
    assert buf.capacity == 5
    assert [buf[i] for i in range(5)] == ["x", None, None, None, None]


def test_sizeof_counts_slot_array():
    buf = GrowableBuffer(100)
    assert sys.getsizeof(buf) > sys.getsizeof(buf._buf)
    assert sys.getsizeof(buf) >= sys.getsizeof(GrowableBuffer(0))


def test_grow_requires_positive_increment():
    buf = GrowableBuffer(1)
    with pytest.raises(ValueError):
        buf.grow(0)


def test_swap_and_from_iterable():
    buf = GrowableBuffer.from_iterable([1, 2, 3])
    assert buf.capacity == 3
    buf.swap(0, 2)
    assert [buf[i] for i in range(3)] == [3, 2, 1]
