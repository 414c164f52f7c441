import sys
import time
import numpy as np

from element_ import Element
from heap_ import Heap
from logger import print_
from utils import compare_sort_keys, print_sort_key


class HeapParams:
    def __init__(self):
        self.initial_capacity = 10
        self.n_elements = 20
        self.max_key = 100
        self.user_data = 42
        self.seed = None
        self.print_results = False


def read_input(params, filename):
    """
    Override the defaults in params with the key=value lines of filename.

    :raises FileNotFoundError: If filename does not exist.
    :raises ValueError: On an unknown parameter or a malformed line.
    """
    with open(filename, "r") as input_file:
        for line in input_file:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parameter, value = line.split("=")
            parameter = parameter.strip()
            value = value.strip()

            if parameter == "initial_capacity":
                params.initial_capacity = int(value)
            elif parameter == "n_elements":
                params.n_elements = int(value)
            elif parameter == "max_key":
                params.max_key = int(value)
            elif parameter == "user_data":
                params.user_data = int(value)
            elif parameter == "seed":
                params.seed = int(value)
            elif parameter == "print_results":
                params.print_results = value == "true"
            else:
                raise ValueError(f"Unknown parameter {parameter}")


def fill(heap, n_elements, random_generator, params):
    keys = []
    for _ in range(n_elements):
        sort_key = int(random_generator.integers(0, params.max_key))
        heap.insert(Element(sort_key=sort_key, user_data=params.user_data + sort_key))
        keys.append(sort_key)

        if params.print_results:
            print_("inserted ", end="")
            print_sort_key(Element(sort_key=sort_key))
            heap.dump()
    return keys


def drain(heap, params):
    """Empty the heap in sorted order, checking the order and the payload of each element."""
    keys = []
    last_value = 0
    while not heap.is_empty():
        data = heap.pop()

        if params.print_results:
            print_("popped   ", end="")
            print_sort_key(data)
            heap.dump()

        if data.sort_key < last_value:
            raise RuntimeError(f"popped {data.sort_key} after {last_value}")
        if data.user_data != params.user_data + data.sort_key:
            raise RuntimeError(f"payload {data.user_data} does not match sort key {data.sort_key}")
        last_value = data.sort_key
        keys.append(data.sort_key)
    return keys


def main(argv):
    params = HeapParams()
    if len(argv) > 1:
        try:
            read_input(params, argv[1])
        except FileNotFoundError:
            print_(f"ERROR: cannot open file <{argv[1]}>.")
            return -1

    random_generator = np.random.default_rng(params.seed)

    with Heap(params.initial_capacity, compare_sort_keys, print_sort_key) as heap:
        print_("HEAP FILL")
        begin = time.time()
        fill(heap, params.n_elements, random_generator, params)
        print_("HEAP DRAIN")
        drained = drain(heap, params)
        time_spent = time.time() - begin

    print_(f"Drained {len(drained)} elements in sort order in {time_spent:.4f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
