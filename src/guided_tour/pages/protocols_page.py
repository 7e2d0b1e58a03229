"""Protocols and extensions page.

Classes, dataclasses and enumerations adopt a shared protocol; built-in
numbers gain the same contract through registered extensions.
"""

from __future__ import annotations

import dataclasses
import logging

from guided_tour.exceptions import ContractViolationError
from guided_tour.extensions import (
    ExtendedValue,
    absolute_value,
    adjusted,
    describe,
    describe_all,
)
from guided_tour.protocols import (
    SimpleClass,
    SimpleEnumeration,
    SimpleStructure,
    as_protocol,
)

logger = logging.getLogger(__name__)


def demo_1_class_adoption() -> None:
    """Methods on a class can always modify the instance."""
    a = SimpleClass()
    a.adjust()
    print("1. class:", a.simple_description)


def demo_2_structure_adoption() -> None:
    """A dataclass adjusts in place; a replaced copy is an independent value."""
    b = SimpleStructure()
    untouched = dataclasses.replace(b)
    b.adjust()
    print("2. structure:", b.simple_description, "|", untouched.simple_description)


def demo_3_enumeration_adoption() -> None:
    """Enum members are immutable: adjust the binding, not the member."""
    c = ExtendedValue(SimpleEnumeration.BASIC)
    before = c.simple_description
    c.adjust()
    print("3. enumeration:", before, "->", c.simple_description)


def demo_4_int_extension() -> None:
    """``int`` gains a description and an adjustment without subclassing."""
    print("4a. int literal:", describe(7))
    seven = ExtendedValue(7)
    print("4b. int before:", seven.simple_description)
    seven.adjust()
    print("4c. int after:", seven.simple_description)


def demo_5_float_extension() -> None:
    """``float`` gains the contract plus an ``absolute_value`` helper."""
    double = ExtendedValue(-12.34)
    description = double.simple_description
    magnitude = absolute_value(double.value)
    double.adjust()
    print(
        "5. float:",
        description,
        magnitude,
        double.value,
        describe(absolute_value(double.value)),
    )


def demo_6_protocol_collection() -> None:
    """A protocol works as the element type of a heterogeneous collection."""
    values = [SimpleClass(), SimpleStructure(), SimpleEnumeration.BASIC, 7, -12.34]
    print("6. collection:", describe_all(values), adjusted(2.5))


def demo_7_protocol_typed_access() -> None:
    """A value seen as the protocol only exposes protocol members."""
    a = SimpleClass()
    a.adjust()
    protocol_value = as_protocol(a)
    print("7a. protocol value:", protocol_value.simple_description)
    try:
        _ = protocol_value.another_property
    except ContractViolationError as exc:
        print("7b. contract violation:", exc)


def run_all() -> None:
    """Execute all protocol and extension demonstrations."""
    logger.debug("running protocols and extensions page")
    demo_1_class_adoption()
    demo_2_structure_adoption()
    demo_3_enumeration_adoption()
    demo_4_int_extension()
    demo_5_float_extension()
    demo_6_protocol_collection()
    demo_7_protocol_typed_access()


if __name__ == "__main__":
    run_all()
