"""Exceptions raised by the heap and its buffer.

Each error also derives from the builtin a caller would naturally catch
(``IndexError`` for bad positions and empty heaps, ``ValueError`` for bad
arguments), so plain ``except IndexError`` code keeps working.
"""


class HeapError(Exception):
    """Base class for all heapkit errors."""


class EmptyHeapError(HeapError, IndexError):
    """Raised when the root is requested from an empty heap."""


class HeapIndexError(HeapError, IndexError):
    """Raised when a replacement targets a slot outside the live window."""


class InvalidCapacityError(HeapError, ValueError):
    """Raised when a buffer is requested with a negative capacity."""
