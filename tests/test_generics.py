from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from guided_tour import generics


class MakeArrayTests(unittest.TestCase):
    def test_repeats_item_requested_number_of_times(self) -> None:
        result = generics.make_array("knock", number_of_times=4)
        self.assertEqual(result, ["knock", "knock", "knock", "knock"])

    def test_every_slot_is_the_same_object(self) -> None:
        item: list[int] = []
        result = generics.make_array(item, 3)
        self.assertEqual(len(result), 3)
        self.assertTrue(all(element is item for element in result))

    def test_zero_times_yields_empty_list(self) -> None:
        self.assertEqual(generics.make_array(1, 0), [])

    def test_negative_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generics.make_array("knock", -1)


class AnyCommonElementsTests(unittest.TestCase):
    def test_shared_element_is_found(self) -> None:
        self.assertTrue(generics.any_common_elements([1, 2, 3], [3]))

    def test_disjoint_sequences(self) -> None:
        self.assertFalse(generics.any_common_elements([1, 2, 3], [4, 5]))

    def test_empty_inputs(self) -> None:
        self.assertFalse(generics.any_common_elements([], [1]))
        self.assertFalse(generics.any_common_elements([1], []))

    def test_unhashable_elements(self) -> None:
        self.assertTrue(generics.any_common_elements([[1], [2]], [[2]]))

    def test_one_shot_iterators(self) -> None:
        lhs = iter([1, 2, 3])
        rhs = (value for value in [9, 3])
        self.assertTrue(generics.any_common_elements(lhs, rhs))


class ShowCommonElementsTests(unittest.TestCase):
    def test_numbers_in_lhs_order(self) -> None:
        self.assertEqual(
            generics.show_common_elements([1, 2, 3, 4, 5], [4, 7, 3]), [3, 4]
        )

    def test_strings(self) -> None:
        result = generics.show_common_elements(
            ["apple", "banana", "orange", "peach"], ["orange", "pear", "apple"]
        )
        self.assertEqual(result, ["apple", "orange"])

    def test_duplicates_are_kept_per_pair(self) -> None:
        self.assertEqual(generics.show_common_elements([1, 1], [1, 1]), [1, 1, 1, 1])

    def test_generator_rhs_is_compared_against_every_lhs_item(self) -> None:
        rhs = (value for value in [2, 1])
        self.assertEqual(generics.show_common_elements([1, 2], rhs), [1, 2])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
