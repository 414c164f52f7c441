"""
Binary min-heap over contiguous, growable record storage.

The heap is laid out in an array where the children of slot i live at
2i + 1 and 2i + 2 and the parent of slot i lives at (i - 1) // 2. The
record at slot 0 is always minimal under the caller's ordering. Only the
path from a leaf to the root is ordered, which is all a best-first search
needs to drain elements in sort order.

    3  7 42 9 12 65 44

                ___ 3 ___
               /         \\
              7           42
            /  \\         /  \\
           9   12       65   44
"""
from array_ import MAX_SIZE, Array
from element_ import Element, to_record
from logger import init_logger, print_

logger = init_logger(__name__)


class EmptyError(IndexError):
    """Raised when an element is requested from an empty heap."""


def parent_index(i):
    return (i - 1) // 2


def left_child_index(i):
    return 2 * i + 1


class Heap:
    def __init__(self, size, order, printer=None, max_size=MAX_SIZE):
        """
        Create an empty heap.

        :param size: Initial capacity in records; 0 is allowed.
        :param order: Predicate order(a, b), true when a must not come after b.
        :param printer: Optional function rendering one element for diagnostics.
        :param max_size: Capacity ceiling for growth.
        :raises AllocationError: If the initial storage cannot be allocated.
        """
        if not callable(order):
            raise TypeError("order must be callable")
        self.storage = Array(size, max_size=max_size)
        self.order = order
        self.printer = printer
        logger.debug("Created heap with capacity %d", size)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.free()
        return False

    def insert(self, data):
        """
        Insert a copy of data and restore the heap property by sifting it up.

        :raises AllocationError: If storage is full and cannot grow. The heap is unchanged.
        """
        candidate = Element(*to_record(data))
        idx = self.storage.append_slot()

        # Walk up first; nothing moves until every comparison has succeeded
        path = []
        try:
            while idx > 0:
                parent_idx = parent_index(idx)
                if self.order(self.storage.get(parent_idx), candidate):
                    break
                path.append(parent_idx)
                idx = parent_idx
        except Exception:
            self.storage.remove_last()
            raise

        current = self.storage.length() - 1
        for parent_idx in path:
            self.storage.move(parent_idx, current)
            current = parent_idx
        self.storage.set(current, candidate)

    def pop(self):
        """
        Remove and return the minimal element.

        :raises EmptyError: If the heap is empty.
        """
        if self.is_empty():
            raise EmptyError("pop from an empty heap")

        head = self.storage.get(0)
        in_use = self.storage.length() - 1
        if in_use == 0:
            self.storage.remove_last()
            return head

        # The last record floats down from the root without being written
        temp = self.storage.get(in_use)
        path = []
        idx = 0
        while True:
            child_idx = left_child_index(idx)
            if child_idx >= in_use:
                break

            lowest_child_idx = child_idx
            lowest_child = self.storage.get(child_idx)
            other_child_idx = child_idx + 1
            if other_child_idx < in_use:
                other_child = self.storage.get(other_child_idx)
                if not self.order(lowest_child, other_child):
                    lowest_child_idx = other_child_idx
                    lowest_child = other_child

            if self.order(temp, lowest_child):
                break
            path.append(lowest_child_idx)
            idx = lowest_child_idx

        self.storage.remove_last()
        idx = 0
        for child_idx in path:
            self.storage.move(child_idx, idx)
            idx = child_idx
        self.storage.set(idx, temp)

        return head

    def peek(self):
        if self.is_empty():
            raise EmptyError("peek at an empty heap")
        return self.storage.get(0)

    def is_empty(self):
        return self.storage.length() == 0

    def length(self):
        return self.storage.length()

    def capacity(self):
        return self.storage.size

    def elements(self):
        """Copies of the elements in storage order."""
        return [self.storage.get(i) for i in range(self.storage.length())]

    def is_valid(self):
        """Check that no element is ordered after its parent."""
        for i in range(1, self.storage.length()):
            if not self.order(self.storage.get(parent_index(i)), self.storage.get(i)):
                return False
        return True

    def dump(self):
        if self.printer is None:
            raise ValueError("heap has no printer")
        print_(f"({self.storage.length():<2} in use):", end="")
        for element in self.elements():
            self.printer(element)
        print_()

    def clear(self):
        """Drop every element and keep the allocated capacity."""
        self.storage.delete_all()

    def free(self):
        self.storage.free()
