import unittest
from unittest import mock

from array_ import AllocationError, Array
from element_ import Element


def fill(array, keys):
    for key in keys:
        array.set(array.append_slot(), Element(sort_key=key, user_data=key * 2))


class TestArray(unittest.TestCase):
    def test_growth_factor(self):
        array = Array(4)
        fill(array, range(5))
        self.assertEqual(array.size, 6)
        fill(array, range(1))
        self.assertEqual(array.size, 6)
        fill(array, range(1))
        self.assertEqual(array.size, 9)

    def test_zero_size_grows(self):
        array = Array(0)
        fill(array, [5, 6, 7])
        self.assertEqual(array.length(), 3)
        self.assertGreaterEqual(array.size, 3)
        self.assertEqual([array.get(i).sort_key for i in range(3)], [5, 6, 7])

    def test_growth_keeps_records(self):
        array = Array(1)
        fill(array, range(100))
        for i in range(100):
            self.assertEqual(array.get(i), Element(sort_key=i, user_data=i * 2))

    def test_growth_clamped_to_max_size(self):
        array = Array(2, max_size=3)
        fill(array, range(3))
        self.assertEqual(array.size, 3)
        with self.assertRaises(AllocationError):
            array.append_slot()
        self.assertEqual(array.length(), 3)

    def test_failed_growth_leaves_array_unchanged(self):
        array = Array(2)
        fill(array, [8, 9])
        with mock.patch("array_.np.zeros", side_effect=MemoryError):
            with self.assertRaises(AllocationError):
                array.append_slot()
        self.assertEqual(array.size, 2)
        self.assertEqual(array.length(), 2)
        self.assertEqual([array.get(0).sort_key, array.get(1).sort_key], [8, 9])

    def test_failed_allocation_on_create(self):
        with mock.patch("array_.np.zeros", side_effect=MemoryError):
            with self.assertRaises(AllocationError):
                Array(10)

    def test_negative_size(self):
        with self.assertRaises(ValueError):
            Array(-1)

    def test_index_checked_against_length(self):
        array = Array(4)
        fill(array, [1])
        with self.assertRaises(IndexError):
            array.get(1)
        with self.assertRaises(IndexError):
            array.move(0, 2)

    def test_remove_last(self):
        array = Array(2)
        fill(array, [1, 2])
        array.remove_last()
        self.assertEqual(array.length(), 1)
        self.assertEqual(array.get(0).sort_key, 1)
        with self.assertRaises(IndexError):
            array.get(1)
        array.remove_last()
        with self.assertRaises(IndexError):
            array.remove_last()

    def test_delete_all_keeps_capacity(self):
        array = Array(2)
        fill(array, [1, 2, 3])
        array.delete_all()
        self.assertEqual(array.length(), 0)
        self.assertEqual(array.size, 3)
        fill(array, [9])
        self.assertEqual(array.get(0).sort_key, 9)

    def test_free_twice(self):
        array = Array(4)
        fill(array, [1, 2])
        array.free()
        array.free()
        self.assertEqual(array.size, 0)
        self.assertEqual(array.length(), 0)


if __name__ == "__main__":
    unittest.main()
