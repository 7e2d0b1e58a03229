from __future__ import annotations

import copy
import dataclasses
import sys
import unittest
from pathlib import Path
from typing import Protocol, runtime_checkable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from guided_tour import protocols
from guided_tour.exceptions import ContractViolationError, NotConformingError
from guided_tour.protocols import (
    ExampleProtocol,
    SimpleClass,
    SimpleEnumeration,
    SimpleStructure,
)


class ConformingTypesTests(unittest.TestCase):
    def test_simple_class_adjusts_in_place(self) -> None:
        a = SimpleClass()
        a.adjust()
        self.assertEqual(a.simple_description, "A very simple class.  Now 100% adjusted.")
        self.assertEqual(a.another_property, 69105)

    def test_simple_structure_adjusts_in_place(self) -> None:
        b = SimpleStructure()
        b.adjust()
        self.assertEqual(b.simple_description, "A simple structure (adjusted)")

    def test_structure_copies_are_independent(self) -> None:
        b = SimpleStructure()
        copy = dataclasses.replace(b)
        b.adjust()
        self.assertEqual(copy.simple_description, "A simple structure")

    def test_enumeration_descriptions_and_transition(self) -> None:
        c = SimpleEnumeration.BASIC
        self.assertEqual(c.simple_description, "A simple Enumeration")
        c = c.adjusted()
        self.assertIs(c, SimpleEnumeration.ADJUSTED)
        self.assertEqual(c.simple_description, "A simple Enumeration [adjusted]")
        self.assertIs(c.adjusted(), SimpleEnumeration.ADJUSTED)

    def test_runtime_conformance(self) -> None:
        self.assertIsInstance(SimpleClass(), ExampleProtocol)
        self.assertIsInstance(SimpleStructure(), ExampleProtocol)
        self.assertNotIsInstance(SimpleEnumeration.BASIC, ExampleProtocol)
        self.assertNotIsInstance(7, ExampleProtocol)


@runtime_checkable
class NamedProtocol(ExampleProtocol, Protocol):
    def name(self) -> str:
        ...


class NamedStructure(SimpleStructure):
    def name(self) -> str:
        return "named"


class ProtocolViewTests(unittest.TestCase):
    def test_protocol_members(self) -> None:
        self.assertEqual(
            protocols.protocol_members(ExampleProtocol),
            frozenset({"simple_description", "adjust"}),
        )

    def test_contract_members_are_forwarded(self) -> None:
        a = SimpleClass()
        view = protocols.as_protocol(a)
        view.adjust()
        self.assertEqual(view.simple_description, a.simple_description)
        self.assertTrue(a.simple_description.endswith("Now 100% adjusted."))

    def test_non_contract_member_is_blocked(self) -> None:
        view = protocols.as_protocol(SimpleClass())
        with self.assertRaises(ContractViolationError):
            view.another_property
        with self.assertRaises(AttributeError):
            view.another_property
        self.assertFalse(hasattr(view, "another_property"))

    def test_non_contract_assignment_is_blocked(self) -> None:
        a = SimpleClass()
        view = protocols.as_protocol(a)
        with self.assertRaises(ContractViolationError):
            view.another_property = 1
        self.assertEqual(a.another_property, 69105)

    def test_view_exposes_only_protocol_members(self) -> None:
        view = protocols.as_protocol(SimpleStructure())
        self.assertIs(view.protocol, ExampleProtocol)
        self.assertEqual(dir(view), ["adjust", "simple_description"])

    def test_non_conforming_value_is_rejected(self) -> None:
        with self.assertRaises(NotConformingError):
            protocols.as_protocol(42)
        with self.assertRaises(TypeError):
            protocols.ProtocolView("text")

    def test_inherited_protocol_members(self) -> None:
        self.assertEqual(
            protocols.protocol_members(NamedProtocol),
            frozenset({"simple_description", "adjust", "name"}),
        )
        view = protocols.as_protocol(NamedStructure(), NamedProtocol)
        self.assertEqual(view.simple_description, "A simple structure")
        self.assertEqual(view.name(), "named")
        view.adjust()
        self.assertEqual(view.simple_description, "A simple structure (adjusted)")

    def test_readonly_member_assignment_is_blocked(self) -> None:
        b = SimpleStructure()
        view = protocols.as_protocol(b)
        self.assertEqual(
            protocols.readonly_members(ExampleProtocol), frozenset({"simple_description"})
        )
        with self.assertRaises(ContractViolationError):
            view.simple_description = "rewritten"
        self.assertEqual(b.simple_description, "A simple structure")

    def test_copy_keeps_target_and_protocol(self) -> None:
        a = SimpleClass()
        view = protocols.as_protocol(a)
        duplicate = copy.copy(view)
        self.assertIs(duplicate.protocol, ExampleProtocol)
        duplicate.adjust()
        self.assertTrue(a.simple_description.endswith("Now 100% adjusted."))
        with self.assertRaises(ContractViolationError):
            duplicate.another_property


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
