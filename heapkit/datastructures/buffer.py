from __future__ import annotations
import ctypes
import sys
from typing import Generic, Iterable, TypeVar

from ..errors import InvalidCapacityError

T = TypeVar("T")


class GrowableBuffer(Generic[T]):
    """A fixed-capacity slot array that can be grown by a set increment.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • The buffer has no notion of a logical length: every slot in
      ``[0, capacity)`` is addressable and the owner decides which are live.
    • Growth adds a fixed number of slots and copies every existing slot.
      It never shrinks.
    • Every slot starts out as None, so a slot that was never written reads
      back as None and growth copies the whole array unconditionally.
    """

    __slots__ = ("_buf", "_capacity")

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError(f"capacity must be an int, not {type(capacity).__name__}")
        if capacity < 0:
            raise InvalidCapacityError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._buf = self._make_array(capacity)

    @classmethod
    def from_iterable(cls, it: Iterable[T]) -> "GrowableBuffer[T]":
        """Build a buffer sized exactly to the items of `it`, filled in order."""
        items = list(it)
        out: GrowableBuffer[T] = cls(len(items))
        for i, v in enumerate(items):
            out._buf[i] = v
        return out

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """ctypes py_object array of length `capacity` with every slot set to None."""
        return (capacity * ctypes.py_object)(*([None] * capacity))

    def _check(self, idx: int) -> int:
        if idx < 0 or idx >= self._capacity:
            raise IndexError(f"buffer slot {idx} out of range [0, {self._capacity})")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of physical slots."""
        return self._capacity

    def grow(self, increment: int) -> None:
        """Add `increment` slots, copying every existing slot into the new array.

        Raises:
            ValueError: if `increment` is not positive.
        """
        if increment <= 0:
            raise ValueError("increment must be > 0")
        new_capacity = self._capacity + increment
        new_buf = self._make_array(new_capacity)
        for i in range(self._capacity):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def swap(self, i: int, j: int) -> None:
        """Exchange the contents of slots `i` and `j`."""
        buf = self._buf
        buf[i], buf[j] = buf[j], buf[i]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._check(idx)] = value

    def __len__(self) -> int:
        """Physical length, same as `capacity`."""
        return self._capacity

    def __sizeof__(self) -> int:
        """Bytes held by this object plus its slot array (not the elements)."""
        return object.__sizeof__(self) + sys.getsizeof(self._buf)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"GrowableBuffer(capacity={self._capacity})"
