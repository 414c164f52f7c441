import numpy as np

MAX_SORT_KEY = 2 ** 32 - 1
MAX_USER_DATA = 2 ** 32 - 1
MAX_USER_JUNK = 2 ** 8 - 1

# Layout of one record in heap storage
ELEMENT_DTYPE = np.dtype([
    ("sort_key", np.uint32),
    ("user_data", np.uint32),
    ("user_junk", np.uint8),
])

_LIMITS = (
    ("sort_key", MAX_SORT_KEY),
    ("user_data", MAX_USER_DATA),
    ("user_junk", MAX_USER_JUNK),
)


class Element:
    def __init__(self, sort_key=0, user_data=0, user_junk=0):
        self.sort_key = sort_key
        self.user_data = user_data
        self.user_junk = user_junk

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented
        return (self.sort_key, self.user_data, self.user_junk) == \
            (other.sort_key, other.user_data, other.user_junk)

    def __repr__(self):
        return f"Element(sort_key={self.sort_key}, user_data={self.user_data}, user_junk={self.user_junk})"


def to_record(element: Element) -> tuple:
    """
    Convert an element into a storage record tuple, in ELEMENT_DTYPE field order.

    :param element: Element to convert.
    :return: Tuple of (sort_key, user_data, user_junk).
    :raises TypeError: If a field is not an integer.
    :raises ValueError: If a field does not fit its unsigned storage type.
    """
    record = []
    for field, limit in _LIMITS:
        value = getattr(element, field)
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{field} must be an integer, got {type(value).__name__}")
        if value < 0 or value > limit:
            raise ValueError(f"{field} {value} out of range [0, {limit}]")
        record.append(int(value))
    return tuple(record)


def from_record(record) -> Element:
    """Copy a storage record into a new Element."""
    return Element(
        sort_key=int(record["sort_key"]),
        user_data=int(record["user_data"]),
        user_junk=int(record["user_junk"]),
    )
