"""Array-backed binary max-heap with index replacement and bulk build."""

from .datastructures import BinaryHeap, Comparable, GrowableBuffer, MinOrder
from .errors import EmptyHeapError, HeapError, HeapIndexError, InvalidCapacityError

__version__ = "0.1.0"

__all__ = [
    "BinaryHeap",
    "Comparable",
    "GrowableBuffer",
    "MinOrder",
    "HeapError",
    "EmptyHeapError",
    "HeapIndexError",
    "InvalidCapacityError",
]
