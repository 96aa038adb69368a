"""
FILE: worktravel/cli/app.py
PURPOSE: Shared Typer app, consoles and screen loader for CLI commands
EXPORTS:
  - app (Typer application)
  - console / error_console (Rich consoles)
  - __version__
  - load_screen() -> TodoScreen
  - fail(message) -> NoReturn
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - worktravel.core.screen (open_screen)
NOTES:
  - Command modules import from here, main.py imports the command modules
    to register them
"""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ..core.screen import TodoScreen, open_screen

app = typer.Typer(
    name="worktravel",
    help="Two-context (Work / Travel) to-do list for the terminal",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

__version__ = "0.1.0"


def load_screen() -> TodoScreen:
    """Build the screen and load saved items and mode."""
    return open_screen()


def fail(message: str) -> NoReturn:
    """Print an error to stderr and exit with code 1."""
    error_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)
