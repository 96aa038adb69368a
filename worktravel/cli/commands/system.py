"""
FILE: worktravel/cli/commands/system.py
PURPOSE: System commands (version, mode, repl)
"""

from typing import Optional

import typer

from ..app import app, console, fail, load_screen, __version__
from ...core.models import Context


@app.command()
def version():
    """Show worktravel version."""
    console.print(f"worktravel v{__version__}")


@app.command()
def mode(
    name: Optional[str] = typer.Argument(None, help="work or travel"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show or set the active context.

    Example:
        worktravel mode
        worktravel mode travel
    """
    screen = load_screen()

    if name is not None:
        name = name.lower()
        if name not in ("work", "travel"):
            fail(f"Invalid mode '{name}'. Must be one of: work, travel")

        screen.switch_context(Context(name))
        if screen.notice:
            fail(screen.notice)

    context = screen.store.active_context
    if raw:
        console.print(context.value)
    else:
        console.print(f"Mode: [bold]{context.label}[/bold]")


@app.command()
def repl():
    """Launch interactive REPL."""
    from ...repl import main as repl_main
    repl_main()
