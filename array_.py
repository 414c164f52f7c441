import numpy as np

from element_ import ELEMENT_DTYPE, from_record, to_record
from logger import init_logger

logger = init_logger(__name__)

# Largest capacity addressable by an unsigned 32-bit index
MAX_SIZE = 2 ** 32 - 1


class AllocationError(MemoryError):
    """Raised when record storage cannot be obtained or grown."""


def _allocate(size, dtype):
    try:
        return np.zeros(size, dtype=dtype)
    except MemoryError as e:
        raise AllocationError(f"cannot allocate {size} records") from e


class Array:
    """Contiguous, growable storage of fixed-size element records."""

    def __init__(self, size, dtype=ELEMENT_DTYPE, max_size=MAX_SIZE):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if size > max_size:
            raise AllocationError(f"size {size} exceeds the maximum of {max_size} records")
        self.elements = _allocate(size, dtype)
        self.size = size
        self.max_size = max_size
        self.index = 0

    def _resize(self):
        if self.size >= self.max_size:
            raise AllocationError(f"cannot grow past {self.max_size} records")
        new_size = min(max(self.size + (self.size + 1) // 2, self.size + 1), self.max_size)

        # The current buffer stays in place until the new one is filled
        new_elements = _allocate(new_size, self.elements.dtype)
        new_elements[:self.index] = self.elements[:self.index]

        logger.debug("Resized storage from %d to %d records", self.size, new_size)
        self.elements = new_elements
        self.size = new_size

    def _check_index(self, i):
        if i < 0 or i >= self.index:
            raise IndexError(f"index {i} out of range for {self.index} records")

    def append_slot(self):
        """Reserve the slot after the last record, growing if needed, and return its index."""
        if self.index >= self.size:
            self._resize()
        self.index += 1
        return self.index - 1

    def get(self, i):
        self._check_index(i)
        return from_record(self.elements[i])

    def set(self, i, data):
        self._check_index(i)
        self.elements[i] = to_record(data)

    def move(self, src, dst):
        """Copy the record at src over the record at dst."""
        self._check_index(src)
        self._check_index(dst)
        self.elements[dst] = self.elements[src]

    def remove_last(self):
        if self.index == 0:
            raise IndexError("remove from empty storage")
        self.index -= 1

    def length(self):
        return self.index

    def delete_all(self):
        self.index = 0

    def free(self):
        logger.debug("Freeing storage of %d records", self.size)
        self.elements = self.elements[:0].copy()
        self.size = 0
        self.index = 0
