"""The capability contract and the types that adopt it.

Classes, dataclasses and enumerations can all satisfy a protocol. Python
checks conformance structurally: a type conforms by providing the members,
without inheriting from the protocol.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, runtime_checkable

from guided_tour.exceptions import ContractViolationError, NotConformingError

logger = logging.getLogger(__name__)


@runtime_checkable
class ExampleProtocol(Protocol):
    """A value with a textual description that can adjust itself in place."""

    @property
    def simple_description(self) -> str:
        ...

    def adjust(self) -> None:
        ...


class SimpleClass:
    """Reference type adopting :class:`ExampleProtocol`.

    ``another_property`` is an extra member outside the contract; it is
    unreachable through a :class:`ProtocolView`.
    """

    def __init__(self) -> None:
        self.simple_description = "A very simple class."
        self.another_property = 69105

    def adjust(self) -> None:
        self.simple_description += "  Now 100% adjusted."

    def __repr__(self) -> str:
        return f"SimpleClass(simple_description={self.simple_description!r})"


@dataclass
class SimpleStructure:
    """Value type adopting :class:`ExampleProtocol`.

    Use :func:`dataclasses.replace` to take an independent copy before
    adjusting when the original must be kept.
    """

    simple_description: str = "A simple structure"

    def adjust(self) -> None:
        self.simple_description += " (adjusted)"


class SimpleEnumeration(Enum):
    """Enumeration with a description per case.

    Members are immutable, so the transition is expressed by
    :meth:`adjusted`; wrap a member in
    :class:`~guided_tour.extensions.ExtendedValue` to adjust a binding in
    place.
    """

    BASIC = "basic"
    ADJUSTED = "adjusted"

    @property
    def simple_description(self) -> str:
        if self is SimpleEnumeration.BASIC:
            return "A simple Enumeration"
        return "A simple Enumeration [adjusted]"

    def adjusted(self) -> "SimpleEnumeration":
        return SimpleEnumeration.ADJUSTED


def _protocol_bases(protocol: type) -> list[type]:
    return [
        base
        for base in protocol.__mro__
        if getattr(base, "_is_protocol", False)
        and base not in (Protocol, Generic, object)
    ]


def protocol_members(protocol: type) -> frozenset[str]:
    """Return the public member names ``protocol`` declares or inherits."""
    names: set[str] = set()
    for base in _protocol_bases(protocol):
        names.update(name for name in vars(base) if not name.startswith("_"))
        names.update(
            name
            for name in inspect.get_annotations(base)
            if not name.startswith("_")
        )
    return frozenset(names)


def readonly_members(protocol: type) -> frozenset[str]:
    """Return the members ``protocol`` declares as read-only properties."""
    names: set[str] = set()
    for base in _protocol_bases(protocol):
        names.update(
            name
            for name, value in vars(base).items()
            if isinstance(value, property) and value.fset is None
        )
    return frozenset(names)


class ProtocolView:
    """A value seen as its protocol type.

    Only members declared by the protocol are reachable; everything else
    raises :class:`ContractViolationError`, even when the wrapped object
    has it. Members the protocol declares as read-only properties can not
    be assigned through the view. The protocol must be ``runtime_checkable``.
    """

    __slots__ = ("_target", "_protocol", "_members", "_readonly")

    def __init__(self, target: Any, protocol: type = ExampleProtocol) -> None:
        if not isinstance(target, protocol):
            raise NotConformingError(
                f"{type(target).__name__} does not conform to {protocol.__name__}"
            )
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_protocol", protocol)
        object.__setattr__(self, "_members", protocol_members(protocol))
        object.__setattr__(self, "_readonly", readonly_members(protocol))

    @property
    def protocol(self) -> type:
        return self._protocol

    def __getattr__(self, name: str) -> Any:
        if name in ProtocolView.__slots__ or name.startswith("__"):
            # Slots not yet restored by copy/pickle, and special lookups.
            raise AttributeError(name)
        if name in self._members:
            return getattr(self._target, name)
        logger.debug(
            "blocked access to %r through %s view of %s",
            name,
            self._protocol.__name__,
            type(self._target).__name__,
        )
        raise ContractViolationError(
            f"value of type '{self._protocol.__name__}' has no member '{name}'"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ProtocolView.__slots__:
            # State restore from copy/pickle.
            object.__setattr__(self, name, value)
            return
        if name not in self._members:
            raise ContractViolationError(
                f"value of type '{self._protocol.__name__}' has no member '{name}'"
            )
        if name in self._readonly:
            raise ContractViolationError(
                f"member '{name}' of '{self._protocol.__name__}' is read-only"
            )
        setattr(self._target, name, value)

    def __dir__(self) -> list[str]:
        return sorted(self._members)

    def __repr__(self) -> str:
        return f"{self._protocol.__name__}({self._target!r})"


def as_protocol(target: Any, protocol: type = ExampleProtocol) -> ProtocolView:
    return ProtocolView(target, protocol)
