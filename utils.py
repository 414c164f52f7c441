from logger import print_


def compare_sort_keys(a, b) -> bool:
    """Order two elements by ascending sort key, equal keys compare as ordered."""
    return a.sort_key <= b.sort_key


def print_sort_key(a) -> None:
    """Print the sort key of an element, without a newline."""
    print_(f"{a.sort_key:<2} ", end="")
