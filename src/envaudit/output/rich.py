"""Shared Rich consoles and status messages."""

from __future__ import annotations

import os

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def should_use_color(no_color: bool, is_tty: bool) -> bool:
    """Decide whether report output should be colored.

    Color is off when ``--no-color`` is given, when ``NO_COLOR`` is set to
    any value (https://no-color.org/), or when stdout is not a terminal.
    """
    if no_color:
        return False
    if "NO_COLOR" in os.environ:
        return False
    return is_tty


def make_console(no_color: bool = False) -> Console:
    """Create a report console honouring the color settings."""
    use_color = should_use_color(no_color, console.is_terminal)
    return Console(highlight=False, no_color=not use_color, soft_wrap=True)
