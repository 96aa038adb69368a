"""
FILE: worktravel/repl/commands/system.py
PURPOSE: Context and system command handlers for REPL (work, travel, mode, help, clear)
"""

from rich.panel import Panel

from ..display import console, display_header, display_notice
from ..parser import ParseResult
from ...core.models import Context
from ...core.screen import TodoScreen

VALID_MODES = ("work", "travel")


def _switch(screen: TodoScreen, context: Context) -> None:
    screen.switch_context(context)

    view = screen.render()
    display_notice(view)
    display_header(view.active_context)
    console.print(f"[dim]{len(view.items)} item(s) | {view.placeholder}[/dim]")


def handle_work_command(result: ParseResult, screen: TodoScreen) -> None:
    """Handle 'work' command - switch to the Work context."""
    _switch(screen, Context.WORK)


def handle_travel_command(result: ParseResult, screen: TodoScreen) -> None:
    """Handle 'travel' command - switch to the Travel context."""
    _switch(screen, Context.TRAVEL)


def handle_mode_command(result: ParseResult, screen: TodoScreen) -> None:
    """
    Handle 'mode' command - show or set the active context.

    Usage:
        mode            # Show current context
        mode travel     # Switch to Travel
    """
    if not result.args:
        display_header(screen.store.active_context)
        return

    mode = result.args[0].lower()
    if mode not in VALID_MODES:
        console.print(f"[red]Error:[/red] Invalid mode '{mode}'")
        console.print(f"[dim]Valid modes: {', '.join(VALID_MODES)}[/dim]")
        return

    _switch(screen, Context(mode))


def handle_help_command(result: ParseResult, screen: TodoScreen) -> None:
    """Handle 'help' command - show available commands."""
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]work[/cyan] / [cyan]travel[/cyan]            Switch context
  [cyan]mode \\[work|travel][/cyan]       Show or set context
  [cyan]add <text>[/cyan]               Add an item to the current context
  [cyan]ls[/cyan]                       List items in the current context
  [cyan]done [<n>][/cyan]               Toggle item done (picker if no number)
  [cyan]rm [<n>] [--yes][/cyan]         Delete item after confirmation
  [cyan]edit [<n>][/cyan]               Edit item (not available yet)
  [cyan]help[/cyan]                     Show this help
  [cyan]clear[/cyan]                    Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]            Exit REPL

[bold cyan]Examples:[/bold cyan]

  [dim]add Finish the report
  travel
  add "Book the hotel"
  ls
  done 1
  rm 1[/dim]

  [dim]<n> is the row number shown by 'ls'. Full item ids also work.[/dim]
"""
    console.print(Panel(help_text, title="worktravel Help", border_style="cyan"))


def handle_clear_command(result: ParseResult, screen: TodoScreen) -> None:
    console.clear()
    display_header(screen.store.active_context)
