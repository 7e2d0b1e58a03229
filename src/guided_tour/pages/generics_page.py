"""Generics page: generic functions and a generic sum type."""

from __future__ import annotations

import logging

from guided_tour.generics import any_common_elements, make_array, show_common_elements
from guided_tour.optional import NOTHING, Nothing, OptionalValue, Some, unwrap_or

logger = logging.getLogger(__name__)


def demo_1_generic_function() -> None:
    """A type variable in the signature makes the function generic."""
    knocks = make_array("knock", number_of_times=4)
    print("1. make_array:", knocks)


def demo_2_generic_sum_type() -> None:
    """Reimplement the optional type as a generic two-case sum type.

    The variable starts in the absent case and only holds a value once one
    is explicitly assigned.
    """

    possible_integer: OptionalValue[int] = NOTHING
    before = possible_integer
    possible_integer = Some(100)

    def render(opt: OptionalValue[int]) -> str:
        match opt:
            case Some(value):
                return f"some({value})"
            case Nothing():
                return "none"
        return "?"

    print(
        "2. optional:",
        render(before),
        render(possible_integer),
        unwrap_or(before, 0),
    )


def demo_3_constrained_generics() -> None:
    """Both sequences must share an element type that supports ``==``."""
    print("3. any_common_elements:", any_common_elements([1, 2, 3], [3]))


def demo_4_common_elements() -> None:
    """Return the shared elements instead of a yes/no answer."""
    numbers = show_common_elements([1, 2, 3, 4, 5], [4, 7, 3])
    fruits = show_common_elements(
        ["apple", "banana", "orange", "peach"], ["orange", "pear", "apple"]
    )
    print("4. show_common_elements:", numbers, fruits)


def run_all() -> None:
    """Execute all generics demonstrations."""
    logger.debug("running generics page")
    demo_1_generic_function()
    demo_2_generic_sum_type()
    demo_3_constrained_generics()
    demo_4_common_elements()


if __name__ == "__main__":
    run_all()
