"""Logging setup shared by the headless runner and the pygame front end."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from holesim.exceptions import ConfigurationError

LOG_LEVEL_ENV = "HOLESIM_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_level(level: str | None = None) -> int:
    """Turn a level name (or ``$HOLESIM_LOG_LEVEL``, or INFO) into a logging level.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level {name!r}")
    return resolved


def configure_logging(
    *,
    level: str | None = None,
    fmt: str = LOG_FORMAT,
    datefmt: str = LOG_DATEFMT,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure root logging and the ``holesim`` package logger.

    Args:
        level: Level name; falls back to ``$HOLESIM_LOG_LEVEL`` and then INFO.
        fmt: Log record format.
        datefmt: Timestamp format.
        extra_loggers: Other logger names (e.g. ``"game"``) set to the same level.

    Returns:
        The ``holesim`` logger.
    """
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=fmt, datefmt=datefmt)

    package_logger = logging.getLogger("holesim")
    package_logger.setLevel(resolved)
    for name in extra_loggers or ():
        logging.getLogger(name).setLevel(resolved)

    package_logger.debug("Logging at %s", logging.getLevelName(resolved))
    return package_logger
