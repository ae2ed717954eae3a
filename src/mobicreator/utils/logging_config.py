"""Logging setup shared by the library and the command line."""

from __future__ import annotations

import logging

from mobicreator.config import MOBICREATOR_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the mobicreator namespace."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging once for command line runs.

    Args:
        level: Level name or number. Defaults to MOBICREATOR_LOG_LEVEL.
    """
    resolved = level if level is not None else MOBICREATOR_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    logging.getLogger("mobicreator").setLevel(resolved)
