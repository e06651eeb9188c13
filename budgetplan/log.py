"""Logging setup for budgetplan.

Library modules log through logging.getLogger(__name__) and never
configure handlers themselves; the CLI calls configure_logging().
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "get_logger"]

ROOT_LOGGER = "budgetplan"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the package logger, or a child of it."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Send budgetplan log records to a rich handler on stderr.

    Calling this again replaces the previous handler.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or number.
        console: Console to log to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
