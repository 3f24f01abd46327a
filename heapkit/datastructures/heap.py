from __future__ import annotations
import logging
import operator
from typing import Any, Generic, Iterable, Protocol, TypeVar

from ..errors import EmptyHeapError, HeapIndexError
from .buffer import GrowableBuffer

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    """Anything orderable with ``<``."""

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


class BinaryHeap(Generic[T]):
    """An array-backed binary max-heap over a fixed-increment growable buffer.

    Implementation notes
    --------------------
    • The live elements occupy slots ``[0, high)`` of the buffer; children of
      slot ``i`` are ``2i+1`` and ``2i+2``.
    • There is no front pointer: the window always starts at slot 0, so the
      logical size is simply ``high``.
    • The buffer grows by ``GROWTH_INCREMENT`` slots (not doubling) when an
      insert finds it full. Removed elements stay in their slot until
      overwritten.
    • Only ``<`` is used to compare elements. Wrap values in :class:`MinOrder`
      to get min-heap behaviour.
    """

    __slots__ = ("_buf", "_high")

    # Initial allocated capacity when none is given.
    DEFAULT_CAPACITY = 16
    # Slots added each time the buffer fills up.
    GROWTH_INCREMENT = 10

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._buf: GrowableBuffer[T] = GrowableBuffer(capacity)
        self._high = 0

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> "BinaryHeap[T]":
        """Build a heap from `items` in O(n) by heapifying bottom-up.

        The buffer is sized exactly to the input, so the first insert after
        construction grows it.
        """
        heap: BinaryHeap[T] = cls.__new__(cls)
        heap._buf = GrowableBuffer.from_iterable(items)
        heap._high = heap._buf.capacity
        for i in range(heap._high // 2 - 1, -1, -1):
            heap._heapify(i)
        logger.debug("built heap of %d elements from sequence", heap._high)
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _parent(idx: int) -> int:
        # The root is its own parent; loops stop when parent == child.
        return 0 if idx == 0 else (idx - 1) // 2

    def _grow(self) -> None:
        old = self._buf.capacity
        self._buf.grow(self.GROWTH_INCREMENT)
        logger.debug("heap buffer grown from %d to %d slots", old, self._buf.capacity)

    def _heapify(self, idx: int) -> None:
        """Repair the subtree rooted at `idx` top-down.

        While the node is smaller than one of its children, swap it with the
        larger child and continue from the slot that received it.
        """
        buf = self._buf
        n = self._high
        while not self.is_heap_node(idx):
            left = 2 * idx + 1
            right = 2 * idx + 2
            if right >= n:
                large = left
            else:
                large = right if buf[left] < buf[right] else left
            buf.swap(large, idx)
            idx = large

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def capacity(self) -> int:
        """Physical number of slots in the backing buffer."""
        return self._buf.capacity

    def insert(self, value: T) -> None:
        """Add `value` and sift it up toward the root (O(log n))."""
        if self._high == self._buf.capacity:
            self._grow()
        buf = self._buf
        buf[self._high] = value

        child = self._high
        parent = self._parent(child)
        while parent != child and buf[parent] < buf[child]:
            buf.swap(parent, child)
            child = parent
            parent = self._parent(child)
        self._high += 1

    def extract_root(self) -> T:
        """Remove and return the largest element (O(log n)).

        Raises:
            EmptyHeapError: if the heap is empty.
        """
        if self._high == 0:
            raise EmptyHeapError("extract from empty heap")
        buf = self._buf
        root = buf[0]
        buf.swap(self._high - 1, 0)
        self._high -= 1
        self._heapify(0)
        return root

    def peek(self) -> T:
        """Return the largest element without removing it.

        Raises:
            EmptyHeapError: if the heap is empty.
        """
        if self._high == 0:
            raise EmptyHeapError("peek at empty heap")
        return self._buf[0]

    def replace(self, value: T, index: int) -> T:
        """Overwrite slot `index` with `value` and return what was there.

        The new value may be too small for its subtree, too large for its
        ancestors, or both, so the slot is heapified downward first and then
        every parent on the path to the root that is smaller than its child
        is heapified in turn.

        Raises:
            HeapIndexError: unless ``0 <= index < size()``.
            TypeError: if `index` is not an integer (bools included).
        """
        if isinstance(index, bool):
            raise TypeError("heap index must be an int, not bool")
        index = operator.index(index)
        if index < 0 or index >= self._high:
            raise HeapIndexError(f"heap index {index} out of range [0, {self._high})")
        buf = self._buf
        replaced = buf[index]
        buf[index] = value
        self._heapify(index)

        child = index
        parent = self._parent(child)
        while parent != child and buf[parent] < buf[child]:
            self._heapify(parent)
            child = parent
            parent = self._parent(child)
        return replaced

    def size(self) -> int:
        return self._high

    def is_empty(self) -> bool:
        return self._high == 0

    def is_heap_node(self, idx: int) -> bool:
        """True if slot `idx` is not smaller than any of its in-range children."""
        n = self._high
        if idx >= n // 2:
            return True  # leaf
        buf = self._buf
        node = buf[idx]
        right = 2 * idx + 2
        if node < buf[2 * idx + 1]:
            return False
        return right >= n or not node < buf[right]

    def is_heap(self) -> bool:
        """Check the heap property over the whole window. O(n); for tests."""
        for i in range(self._high):
            if not self.is_heap_node(i):
                logger.debug("heap property fails at index %d", i)
                return False
        return True

    def render(self) -> str:
        """Live elements in array order, e.g. ``[9, 5, 8]``; ``[]`` when empty."""
        buf = self._buf
        return "[" + ", ".join(str(buf[i]) for i in range(self._high)) + "]"

    def __len__(self) -> int:
        return self._high

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._high != 0

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        buf = self._buf
        return "BinaryHeap([" + ", ".join(repr(buf[i]) for i in range(self._high)) + "])"


class MinOrder(Generic[T]):
    """Wrap a value so that it sorts in reverse.

    A :class:`BinaryHeap` of ``MinOrder`` items extracts the smallest wrapped
    value first.
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __lt__(self, other: "MinOrder[T]") -> bool:
        return other.value < self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MinOrder):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"MinOrder({self.value!r})"
