"""
FILE: worktravel/cli/main.py
PURPOSE: Typer-based CLI for one-shot commands; launches the REPL by default
EXPORTS:
  - app (Typer application, from cli.app)
  - main() (entry point)
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - worktravel.cli.commands (command registration)
  - worktravel.logging_setup (logging configuration)
  - worktravel.core.repository (data directory for the log file)
NOTES:
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
  - --verbose lowers the console log level to DEBUG
"""

import logging
import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer

from .app import app, error_console
from ..core import repository
from ..logging_setup import setup_logging, console_level_from_env


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs on stderr"),
):
    """
    Configure logging, then launch the REPL when no command is given.
    """
    level = logging.DEBUG if verbose else console_level_from_env()
    try:
        setup_logging(repository.DB_DIR, console_level=level)
    except OSError as e:
        error_console.print(f"[yellow]Warning:[/yellow] Logging to file disabled: {e}")

    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Commands register themselves with app on import
from .commands import (  # noqa: E402,F401
    add,
    ls,
    done,
    rm,
    edit,
    version,
    mode,
    repl,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
