from .buffer import GrowableBuffer
from .heap import BinaryHeap, Comparable, MinOrder

__all__ = [
    "GrowableBuffer",
    "BinaryHeap",
    "Comparable",
    "MinOrder",
]
