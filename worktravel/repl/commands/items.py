"""
FILE: worktravel/repl/commands/items.py
PURPOSE: Item command handlers for REPL (add, ls, done, rm, edit)
"""

from rich.markup import escape

from ..display import console, display_item, display_items_table, display_notice
from ..parser import ParseResult
from ..pickers import resolve_item, pick_item, ask_confirmation
from ..style import celebrate_add, celebrate_done, celebrate_delete
from ...core.constants import CONFIRM_DELETE_TITLE, CONFIRM_DELETE_MESSAGE
from ...core.screen import TodoScreen


def _target_item(result: ParseResult, screen: TodoScreen, title: str):
    """Resolve the first arg to an item, or show the picker when there is none."""
    if not result.args:
        return pick_item(screen, title=title)

    item = resolve_item(screen, result.args[0])
    if item is None:
        console.print(
            f"[red]Error:[/red] No item {escape(result.args[0])} in "
            f"{screen.store.active_context.label}"
        )
    return item


def handle_add_command(result: ParseResult, screen: TodoScreen) -> None:
    """
    Handle 'add' command - add an item to the active context.

    Usage:
        add Buy milk
        add "Book the hotel"
    """
    screen.change_text(result.text)
    item = screen.submit()

    view = screen.render()
    if view.notice:
        display_notice(view)
        return

    if item is None:
        console.print("[red]Error:[/red] Text required")
        console.print(f"[dim]Usage: add <text>   ({view.placeholder})[/dim]")
        return

    console.print(f"[green]+ Added to [bold]{item.context.label}[/bold]:[/green] {escape(item.text)}")
    console.print(f"[dim]{celebrate_add()}[/dim]")


def handle_ls_command(result: ParseResult, screen: TodoScreen) -> None:
    """
    Handle 'ls' command - list items of the active context.

    Usage:
        ls
    """
    view = screen.render()
    display_items_table(view.items)


def handle_done_command(result: ParseResult, screen: TodoScreen) -> None:
    """
    Handle 'done' command - toggle completion of an item.

    Usage:
        done 2
        done           (shows picker)
    """
    item = _target_item(result, screen, "Toggle done")
    if item is None:
        return

    screen.toggle(item.id)

    view = screen.render()
    display_notice(view)
    if item.completed:
        display_item(item, "Completed:")
        console.print(f"[dim]{celebrate_done()}[/dim]")
    else:
        display_item(item, "Reopened:")


def handle_rm_command(result: ParseResult, screen: TodoScreen) -> None:
    """
    Handle 'rm' command - delete an item after confirmation.

    Usage:
        rm 2
        rm 2 --yes     (skip confirmation)
        rm             (shows picker)
    """
    item = _target_item(result, screen, "Delete item")
    if item is None:
        return

    screen.request_delete(item.id)

    confirmed = bool(result.flags.get("yes", False))
    if not confirmed:
        console.print(f"[bold]{CONFIRM_DELETE_TITLE}[/bold]: {escape(item.text)}")
        confirmed = ask_confirmation(CONFIRM_DELETE_MESSAGE)

    if not confirmed:
        screen.cancel_delete()
        console.print("[yellow]Cancelled[/yellow]")
        return

    deleted = screen.confirm_delete()

    view = screen.render()
    display_notice(view)
    if deleted:
        console.print(f"[green]Deleted:[/green] {escape(item.text)}")
        console.print(f"[dim]{celebrate_delete()}[/dim]")


def handle_edit_command(result: ParseResult, screen: TodoScreen) -> None:
    """
    Handle 'edit' command - placeholder, editing is not supported yet.

    Usage:
        edit 2
    """
    item = _target_item(result, screen, "Edit item")
    if item is None:
        return

    screen.edit(item.id)
    console.print("[yellow]Editing is not available yet[/yellow]")
