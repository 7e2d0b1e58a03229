"""Runtime configuration for the tour runner.

Settings come from the environment and may be overridden by command-line
flags:

``GUIDED_TOUR_LOG_LEVEL``
    Logging level name for the ``guided_tour`` logger (default ``WARNING``).
``GUIDED_TOUR_COLOR``
    ``1/true/yes/on`` or ``0/false/no/off``; colour is on by default.
``NO_COLOR``
    Any non-empty value disables colour unless ``GUIDED_TOUR_COLOR``
    explicitly enables it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping

from guided_tour.exceptions import ConfigError

LOG_LEVEL_ENV = "GUIDED_TOUR_LOG_LEVEL"
COLOR_ENV = "GUIDED_TOUR_COLOR"
NO_COLOR_ENV = "NO_COLOR"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class TourConfig:
    color: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def with_overrides(
        self, *, color: bool | None = None, log_level: str | None = None
    ) -> "TourConfig":
        """Return a copy with the given non-``None`` settings replaced."""
        changes: dict[str, object] = {}
        if color is not None:
            changes["color"] = color
        if log_level is not None:
            changes["log_level"] = normalize_log_level(log_level)
        return replace(self, **changes)


def normalize_log_level(value: str) -> str:
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigError(f"Unknown log level '{value}'.")
    return name


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got '{value}'.")


def load_config(environ: Mapping[str, str] | None = None) -> TourConfig:
    """Resolve a :class:`TourConfig` from ``environ`` (``os.environ`` by default)."""

    env = os.environ if environ is None else environ

    log_level = normalize_log_level(env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL)

    raw_color = env.get(COLOR_ENV)
    if raw_color:
        color = _parse_bool(COLOR_ENV, raw_color)
    else:
        color = not env.get(NO_COLOR_ENV)

    return TourConfig(color=color, log_level=log_level)
