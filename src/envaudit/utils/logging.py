"""Logging configuration for env-audit.

Modules log through ``logging.getLogger(__name__)``; this module attaches a
Rich handler to the package logger once the CLI knows the verbosity.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "envaudit"
LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Configure the env-audit logger with a Rich handler.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings and errors.
        console: Console to log to. Defaults to a stderr console so log
            lines never mix with report output.

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        level=level,
        show_time=True,
        show_level=True,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False

    return logger
