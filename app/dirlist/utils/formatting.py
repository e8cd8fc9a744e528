"""Rich console formatting utilities.

Provides consistent formatting for diagnostic output using Rich. The
listing itself is plain text and does not go through these consoles.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "path": "bold",
    }
)

# Shared console for diagnostics
err_console = Console(theme=_THEME, stderr=True, highlight=False, emoji=False, soft_wrap=True)


def stdout_is_terminal() -> bool:
    """Check whether standard output is an interactive terminal."""
    return sys.stdout.isatty()


def describe_error(error: Exception) -> str:
    """Return the human-readable reason for a failure.

    OS errors are described by their ``strerror`` (as ``perror`` would),
    everything else by its message.
    """
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def print_path_error(path: str, error: Exception) -> None:
    """Print a per-path failure as ``<path>: <reason>``."""
    err_console.print(f"[path]{escape(path)}[/]: [error]{escape(describe_error(error))}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")
