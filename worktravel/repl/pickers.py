"""
FILE: worktravel/repl/pickers.py
PURPOSE: Resolve item references and pick items from the visible list
EXPORTS:
  - resolve_item(screen, token) -> Item | None
  - pick_item(screen, title) -> Item | None
  - ask_confirmation(message) -> bool
DEPENDENCIES:
  - rich (output)
  - worktravel.core.screen (TodoScreen)
NOTES:
  - A reference is a 1-based row number from 'ls' or a full item id
  - Only items of the active context can be picked
  - Ctrl+C / Ctrl+D at a prompt counts as cancel
"""

from typing import Optional

from rich.markup import escape

from ..core.models import Item
from ..core.screen import TodoScreen
from .display import console


def resolve_item(screen: TodoScreen, token: str) -> Optional[Item]:
    """
    Find a visible item by row number or id.

    Returns:
        The Item, or None if nothing in the active context matches
    """
    return screen.resolve(token)


def pick_item(screen: TodoScreen, title: str = "Select an item") -> Optional[Item]:
    """
    Show the visible items as a numbered list and prompt for one.

    Returns:
        Selected Item, or None if cancelled or nothing to pick
    """
    visible = list(screen.store.list_visible())
    if not visible:
        console.print(f"[yellow]No items in {screen.store.active_context.label}[/yellow]")
        return None

    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    for idx, item in enumerate(visible, 1):
        marker = "x" if item.completed else " "
        console.print(f"  \\[{idx}] \\[{marker}] {escape(item.text)}")

    console.print()
    try:
        selection = input("Select number (or press Enter to cancel): ").strip()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return None

    if not selection:
        return None

    try:
        number = int(selection)
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid number: {escape(selection)}")
        return None

    if not 1 <= number <= len(visible):
        console.print(f"[red]Error:[/red] Number {number} out of range (1-{len(visible)})")
        return None

    return visible[number - 1]


def ask_confirmation(message: str) -> bool:
    """Ask user for confirmation (y/n)."""
    try:
        response = input(f"{message} (y/n): ").strip().lower()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return False
    return response in ("y", "yes")
