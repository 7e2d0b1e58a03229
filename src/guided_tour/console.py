"""Console helpers: the package logger and coloured page headings."""

from __future__ import annotations

import logging
from typing import TextIO

from colored import fg, stylize

LOGGER_NAME = "guided_tour"
LOG_FORMAT = "LOG:%(levelname)s:%(message)s"
HEADING_COLOR = "green"


def configure_logging(
    level: str, stream: TextIO | None = None, name: str = LOGGER_NAME
) -> logging.Logger:
    """Attach a single handler to the package logger and set its level.

    The root logger is left alone so embedding applications keep their own
    configuration. Calling this again only updates the level.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def heading(page_name: str, color: bool = True) -> str:
    text = f"== Running {page_name} =="
    if not color:
        return text
    return stylize(text, fg(HEADING_COLOR))
