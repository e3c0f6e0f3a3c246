"""Console output helpers shared by the CLIs."""

import functools
import sys
from typing import Any, Callable

import click
from rich.console import Console
from rich.markup import escape

from .logger import get_logger

logger = get_logger(__name__)

console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)


def info(message: str, end: str = "\n") -> None:
    """Print an informational message to stdout."""
    console.print(escape(message), end=end)


def success(message: str) -> None:
    """Print a success message to stdout."""
    console.print(f"[green]{escape(message)}[/green]")


def warning(message: str) -> None:
    """Print a warning to stdout."""
    console.print(f"[yellow]{escape(message)}[/yellow]")


def error(message: str) -> None:
    """Print an error to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def handle_errors(func: Callable) -> Callable:
    """
    Report uncaught exceptions of a command and exit with status 1.

    Click's own exceptions and SystemExit pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.exceptions.ClickException, click.exceptions.Exit, click.exceptions.Abort):
            raise
        except KeyboardInterrupt:
            error("Interrupted")
            sys.exit(130)
        except Exception as e:
            logger.debug("Unhandled exception", exc_info=True)
            error(f"Error: {e}")
            sys.exit(1)

    return wrapper
