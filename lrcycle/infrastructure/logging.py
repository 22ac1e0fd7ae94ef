"""
Logging setup.

Library modules only create loggers; applications call setup_logging()
once to route the package's records to stdout.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "lrcycle"

_handler: Optional[logging.Handler] = None


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Calling it again only updates the level and format; handlers are not
    duplicated.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)

    Returns:
        The configured package logger
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(message)s"
        )

    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper()))

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
    if _handler not in package_logger.handlers:
        package_logger.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(format_string))

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
