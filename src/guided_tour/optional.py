"""A generic two-case sum type modelled after the classic option type.

A value of :data:`OptionalValue` is exactly one of:

* :class:`Nothing` - the absent case, shared as :data:`NOTHING`;
* :class:`Some` - the present case carrying a ``value``.

Both cases are frozen dataclasses, so they compare by value and work with
structural pattern matching::

    match possible_integer:
        case Some(value):
            ...
        case Nothing():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from guided_tour.exceptions import UnwrapError

Wrapped = TypeVar("Wrapped")
Default = TypeVar("Default")
Result = TypeVar("Result")


@dataclass(frozen=True)
class Nothing:
    """The absent case."""


@dataclass(frozen=True)
class Some(Generic[Wrapped]):
    """The present case.

    Attributes:
        value: The wrapped value. ``None`` is a legitimate payload here;
               absence is expressed by :class:`Nothing`, not by ``None``.
    """

    value: Wrapped


NOTHING = Nothing()

OptionalValue = Nothing | Some[Wrapped]


def is_some(opt: OptionalValue[Wrapped]) -> bool:
    return isinstance(opt, Some)


def is_nothing(opt: OptionalValue[Wrapped]) -> bool:
    return isinstance(opt, Nothing)


def unwrap(opt: OptionalValue[Wrapped]) -> Wrapped:
    """Return the wrapped value, raising :class:`UnwrapError` when absent."""
    match opt:
        case Some(value):
            return value
        case Nothing():
            raise UnwrapError("called unwrap() on the absent case")
    raise TypeError(f"expected Some or Nothing, got {type(opt).__name__}")


def unwrap_or(opt: OptionalValue[Wrapped], default: Default) -> Wrapped | Default:
    if isinstance(opt, Some):
        return opt.value
    return default


def map_optional(
    opt: OptionalValue[Wrapped], func: Callable[[Wrapped], Result]
) -> OptionalValue[Result]:
    """Apply ``func`` to a present value; the absent case passes through."""
    if isinstance(opt, Some):
        return Some(func(opt.value))
    return NOTHING


def from_nullable(value: Wrapped | None) -> OptionalValue[Wrapped]:
    """Convert a conventional ``None``-or-value into the sum type."""
    if value is None:
        return NOTHING
    return Some(value)
