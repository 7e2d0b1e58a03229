"""Adding the capability contract to types declared elsewhere.

Built-in types such as ``int`` and ``float`` can not grow new attributes,
so the contract is attached from the outside with single-dispatch generic
functions: :func:`describe` and :func:`adjusted` carry one registration per
extended type. Values of those types are immutable, therefore in-place
adjustment happens on a binding, :class:`ExtendedValue`, which rebinds its
``value`` to the adjusted one.

Registering a new type works the same way for types imported from any
library::

    register_extension(Fraction, lambda f: f"The fraction {f}", lambda f: f * 2)
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Generic, Iterable, NoReturn, TypeVar

from guided_tour.exceptions import NotConformingError
from guided_tour.protocols import ExampleProtocol, SimpleEnumeration

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _refuse(value: Any) -> NoReturn:
    raise NotConformingError(
        f"{type(value).__name__} does not conform to {ExampleProtocol.__name__}"
    )


@functools.singledispatch
def describe(value: Any) -> str:
    """Return the contract's textual description of ``value``.

    Values implementing :class:`ExampleProtocol` natively answer with their
    own ``simple_description``; other types need a registered extension.
    """
    if isinstance(value, ExampleProtocol):
        return value.simple_description
    _refuse(value)


@functools.singledispatch
def adjusted(value: Any) -> Any:
    """Return the adjusted replacement for an immutable ``value``."""
    _refuse(value)


@describe.register(int)
def _describe_int(value: int) -> str:
    return f"The number {value}"


@adjusted.register(int)
def _adjusted_int(value: int) -> int:
    return value + 42


@describe.register(float)
def _describe_float(value: float) -> str:
    return f"The number {value}"


@adjusted.register(float)
def _adjusted_float(value: float) -> float:
    # Nearest whole number, halves away from zero. Non-finite values and
    # magnitudes past 2**52 are already whole.
    if not math.isfinite(value) or abs(value) >= 2.0**52:
        return value
    rounded = Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return math.copysign(float(rounded), value)


@describe.register(SimpleEnumeration)
def _describe_enumeration(value: SimpleEnumeration) -> str:
    return value.simple_description


@adjusted.register(SimpleEnumeration)
def _adjusted_enumeration(value: SimpleEnumeration) -> SimpleEnumeration:
    return value.adjusted()


# bool subclasses int but is not a number for the purposes of the tour.
describe.register(bool, _refuse)
adjusted.register(bool, _refuse)


def register_extension(
    cls: type,
    description: Callable[[Any], str],
    adjustment: Callable[[Any], Any],
) -> None:
    """Make ``cls`` conform to the contract without touching its definition."""
    describe.register(cls, description)
    adjusted.register(cls, adjustment)
    logger.debug("registered %s extension for %s", ExampleProtocol.__name__, cls.__name__)


def has_extension(cls: type) -> bool:
    """Whether ``cls`` has a registered extension (not a native conformance)."""
    impl = adjusted.dispatch(cls)
    return impl is not adjusted.registry[object] and impl is not _refuse


def conforms(value: Any) -> bool:
    """Whether ``value`` satisfies the contract natively or via an extension."""
    return isinstance(value, ExampleProtocol) or has_extension(type(value))


def absolute_value(number: float) -> float:
    """The ``absolute_value`` extension for floating-point numbers."""
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise NotConformingError(
            f"absolute_value is not defined for {type(number).__name__}"
        )
    return float(abs(number))


@dataclass
class ExtendedValue(Generic[T]):
    """A mutable binding that gives an extended value an in-place ``adjust``.

    Attributes:
        value: The current value; replaced by :func:`adjusted` on each
               :meth:`adjust` call.
    """

    value: T

    def __post_init__(self) -> None:
        if not has_extension(type(self.value)):
            raise NotConformingError(
                f"no {ExampleProtocol.__name__} extension registered for "
                f"{type(self.value).__name__}"
            )

    @property
    def simple_description(self) -> str:
        return describe(self.value)

    def adjust(self) -> None:
        previous = self.value
        self.value = adjusted(self.value)
        logger.debug("adjusted %r -> %r", previous, self.value)


def describe_all(values: Iterable[Any]) -> list[str]:
    """Describe a heterogeneous collection of conforming values."""
    return [describe(value) for value in values]
