"""Exception hierarchy for the guided tour.

All tour-specific exceptions inherit from :class:`TourError` so that the
command-line runner can catch a single base class. Each subclass also
derives from the closest built-in exception, so callers that only know the
standard hierarchy (``except TypeError``) keep working.
"""


class TourError(Exception):
    """Base exception for all guided tour failures."""


class NotConformingError(TourError, TypeError):
    """Raised when a value does not satisfy the capability contract.

    The value neither implements the protocol natively nor has an extension
    registered for its type.
    """


class ContractViolationError(TourError, AttributeError):
    """Raised when a protocol-typed view is asked for a non-contract member.

    A value seen through :class:`~guided_tour.protocols.ProtocolView` only
    exposes what the protocol declares, even if the wrapped object has more.
    """


class UnwrapError(TourError, ValueError):
    """Raised when the absent case of an optional value is unwrapped."""


class UnknownPageError(TourError, KeyError):
    """Raised when a tour page name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class ConfigError(TourError, ValueError):
    """Raised when a configuration value can not be interpreted."""
