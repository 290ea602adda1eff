"""Logging configuration for the yaml_to_ts package.

Modules log through ``logging.getLogger(__name__)``; this module only
configures the package logger that those loggers propagate to.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "yaml_to_ts"
LOG_LEVEL_ENV = "YAML_TO_TS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Resolve a level name to a logging level.

    Args:
    ----
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). When
            omitted, ``YAML_TO_TS_LOG_LEVEL`` is consulted, then WARNING.

    Returns:
    -------
        Numeric logging level.

    Raises:
    ------
        ValueError: If the level name is unknown.

    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Configure the package logger.

    Args:
    ----
        level: Logging level name, see :func:`resolve_level`.
        log_file: Optional file path for log output.

    Returns:
    -------
        The configured ``yaml_to_ts`` logger.

    """
    log_level = resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
