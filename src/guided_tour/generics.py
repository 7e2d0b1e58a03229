"""Generic functions over arbitrary element types.

A type variable written in the signature makes a function generic: the
checker ties the element type of the arguments to the element type of the
result, while the runtime code stays the same for every type.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

Item = TypeVar("Item")
T = TypeVar("T")


def make_array(item: Item, number_of_times: int) -> list[Item]:
    """Return a list holding ``item`` repeated ``number_of_times`` times.

    Every slot references the same object, so mutable items are shared.
    """

    if number_of_times < 0:
        raise ValueError(
            f"number_of_times must be non-negative, got {number_of_times}."
        )
    result: list[Item] = []
    for _ in range(number_of_times):
        result.append(item)
    return result


def any_common_elements(lhs: Iterable[T], rhs: Iterable[T]) -> bool:
    """Return True if some element of ``lhs`` equals some element of ``rhs``.

    Elements are compared pairwise with ``==``; they do not need to be
    hashable. ``rhs`` is read once up front so one-shot iterators work.
    """

    rhs_items = list(rhs)
    for lhs_item in lhs:
        for rhs_item in rhs_items:
            if lhs_item == rhs_item:
                return True
    return False


def show_common_elements(lhs: Iterable[T], rhs: Iterable[T]) -> list[T]:
    """Collect every ``lhs`` element that equals an element of ``rhs``.

    Matches are kept in ``lhs`` order and repeated once per equal pair, so
    ``[1, 1]`` against ``[1, 1]`` yields four ones.
    """

    rhs_items = list(rhs)
    result: list[T] = []
    for lhs_item in lhs:
        for rhs_item in rhs_items:
            if lhs_item == rhs_item:
                result.append(lhs_item)
    return result
