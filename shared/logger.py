"""Logging setup shared by all tools."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure the root logger with a rich handler on stderr.

    Args:
        name: Name of the logger to return
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        Configured logger
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Avoid stacking handlers when a command runs more than once in-process
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
