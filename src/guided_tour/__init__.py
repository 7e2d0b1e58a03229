"""A guided tour of generics, protocols and extensions.

Small, stateless demonstrations of generic functions and types, a
capability contract expressed as a :class:`typing.Protocol`, and extension
of existing types (including ``int`` and ``float``) through
single-dispatch registrations.
"""

from __future__ import annotations

from guided_tour.exceptions import (
    ConfigError,
    ContractViolationError,
    NotConformingError,
    TourError,
    UnknownPageError,
    UnwrapError,
)
from guided_tour.extensions import (
    ExtendedValue,
    absolute_value,
    adjusted,
    conforms,
    describe,
    describe_all,
    has_extension,
    register_extension,
)
from guided_tour.generics import any_common_elements, make_array, show_common_elements
from guided_tour.optional import (
    NOTHING,
    Nothing,
    OptionalValue,
    Some,
    from_nullable,
    is_nothing,
    is_some,
    map_optional,
    unwrap,
    unwrap_or,
)
from guided_tour.protocols import (
    ExampleProtocol,
    ProtocolView,
    SimpleClass,
    SimpleEnumeration,
    SimpleStructure,
    as_protocol,
    protocol_members,
    readonly_members,
)

__all__ = [
    "ConfigError",
    "ContractViolationError",
    "NotConformingError",
    "TourError",
    "UnknownPageError",
    "UnwrapError",
    "ExtendedValue",
    "absolute_value",
    "adjusted",
    "conforms",
    "describe",
    "describe_all",
    "has_extension",
    "register_extension",
    "any_common_elements",
    "make_array",
    "show_common_elements",
    "NOTHING",
    "Nothing",
    "OptionalValue",
    "Some",
    "from_nullable",
    "is_nothing",
    "is_some",
    "map_optional",
    "unwrap",
    "unwrap_or",
    "ExampleProtocol",
    "ProtocolView",
    "SimpleClass",
    "SimpleEnumeration",
    "SimpleStructure",
    "as_protocol",
    "protocol_members",
    "readonly_members",
]

__version__ = "0.1.0"
