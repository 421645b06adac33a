"""Logging configuration for redactcheck.

This module provides logging setup using the Rich library. Log records go
to standard error so they never mix with the report written to standard
output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"

LOGGER_NAME = "redactcheck"


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> logging.Logger:
    """Configure Python logging with a Rich handler on stderr.

    Args:
        verbose: If True, set log level to DEBUG for detailed output.
                 If False, set log level to WARNING to show only
                 warnings and errors.
        level: Explicit log level; overrides ``verbose`` when given.

    Returns:
        A configured logger instance for use throughout the application.

    Example:
        >>> logger = setup_logging(verbose=True)
        >>> logger.debug("Classifying config.txt")
        >>> logger.warning("Permission denied reading secrets.env")
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.WARNING

    rich_handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(rich_handler)

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    return logger
