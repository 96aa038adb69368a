"""
FILE: worktravel/repl/display.py
PURPOSE: Display functions for the context header, items and notices
EXPORTS:
  - console (shared Rich console)
  - display_header() - Work / Travel header with the active one highlighted
  - display_item() - Display a single item
  - display_items_table() - Display the visible items in a table
  - display_notice() - Show a failed-save notice if there is one
DEPENDENCIES:
  - rich (formatted output)
  - worktravel.core.screen (ScreenView)
  - worktravel.core.models (Item, Context)
NOTES:
  - Item text is user input, so it is escaped before printing as markup
  - Completed items are struck through
  - Rows are numbered; the numbers are what done/rm/edit accept
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import Context, Item
from ..core.screen import ScreenView

console = Console()


def display_header(active: Context, console_instance: Optional[Console] = None) -> None:
    """Print "Work   Travel" with the active context bold and the other dimmed."""
    if console_instance is None:
        console_instance = console

    parts = []
    for context in (Context.WORK, Context.TRAVEL):
        if context is active:
            parts.append(f"[bold white]{context.label}[/bold white]")
        else:
            parts.append(f"[grey50]{context.label}[/grey50]")
    console_instance.print("   ".join(parts))


def item_markup(item: Item) -> str:
    text = escape(item.text)
    if item.completed:
        return f"[strike dim]{text}[/strike dim]"
    return text


def display_item(item: Item, message: str = "", console_instance: Optional[Console] = None) -> None:
    """
    Display a single item with optional message.

    Args:
        item: Item to display
        message: Optional message to show before the item (e.g., "Added:")
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if message:
        console_instance.print(f"[green]{message}[/green]")

    box = "[green]\\[x][/green]" if item.completed else "[ ]"
    console_instance.print(f"  {box} {item_markup(item)}")


def display_items_table(items: List[Item], console_instance: Optional[Console] = None) -> None:
    """
    Display visible items in a numbered table.

    Args:
        items: Items of the active context
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if not items:
        console_instance.print("[dim]Nothing here yet[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Done", width=5)
    table.add_column("To Do", style="white")

    for number, item in enumerate(items, 1):
        table.add_row(
            str(number),
            "[green]x[/green]" if item.completed else "",
            item_markup(item),
        )

    console_instance.print(table)


def display_notice(view: ScreenView, console_instance: Optional[Console] = None) -> None:
    if console_instance is None:
        console_instance = console

    if view.notice:
        console_instance.print(f"[yellow]Warning:[/yellow] {escape(view.notice)}")
