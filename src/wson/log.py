"""
Logging utilities for the wson package.

Uses Python's standard logging module. Every logger lives under the
`wson.` namespace and propagates to the application's handlers. Only the
command line attaches a handler of its own, through `configure_logging`.
"""

import logging
import os
from typing import Dict, Literal, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

PACKAGE_LOGGER = "wson"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

_loggers: Dict[str, logging.Logger] = {}
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Logger name (prefixed with 'wson.')

    Returns:
        Logger with no handlers of its own

    Example:
        >>> logger = get_logger("parser")
        >>> logger.name
        'wson.parser'
    """
    full_name = f"{PACKAGE_LOGGER}.{name}"

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)
    return _loggers[full_name]


def configure_logging(level: Optional[LogLevel] = None) -> logging.Logger:
    """
    Send wson log records to stderr.

    Attaches one stream handler to the `wson` logger, however often it is
    called, and sets the level.

    Args:
        level: Level override (default: WSON_LOG_LEVEL env var or WARNING)

    Returns:
        The `wson` package logger
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(_handler)

    if level:
        logger.setLevel(getattr(logging, level))
    else:
        env_level = os.environ.get("WSON_LOG_LEVEL", "WARNING").upper()
        logger.setLevel(getattr(logging, env_level, logging.WARNING))

    return logger


__all__ = ["LogLevel", "PACKAGE_LOGGER", "get_logger", "configure_logging"]
