"""Logging setup for the command line."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "rooted"


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling this again replaces the previous handler, so the level can be
    changed per command.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO")
        console: Console to log to (defaults to stderr)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    return logger
