"""
FILE: worktravel/cli/commands/items.py
PURPOSE: Item commands (add, ls, done, rm, edit)
"""

import json

import typer
from rich.markup import escape
from rich.table import Table

from ..app import app, console, fail, load_screen
from ...core.constants import CONFIRM_DELETE_TITLE, CONFIRM_DELETE_MESSAGE


def _item_data(item) -> dict:
    return {
        "id": item.id,
        "text": item.text,
        "context": item.context.value,
        "completed": item.completed,
    }


@app.command()
def add(
    text: str = typer.Argument(..., help="Item text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Add an item to the active context.

    Example:
        worktravel add "Finish the report"
    """
    screen = load_screen()
    screen.change_text(text)
    item = screen.submit()

    if screen.notice:
        fail(screen.notice)
    if item is None:
        fail("Item text cannot be empty")

    if json_output:
        console.print(item.to_json(), markup=False, soft_wrap=True)
    elif raw:
        console.print(f"{item.id}: {item.text}", markup=False)
    else:
        console.print(f"[green]+ Added to [bold]{item.context.label}[/bold]:[/green] {escape(item.text)}")


@app.command()
def ls(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List items in the active context.

    Example:
        worktravel ls
        worktravel ls --json
    """
    screen = load_screen()
    view = screen.render()

    if json_output:
        console.print(
            json.dumps([_item_data(i) for i in view.items], indent=2, ensure_ascii=False),
            markup=False,
            soft_wrap=True,
        )
        return

    if raw:
        for number, item in enumerate(view.items, 1):
            marker = "x" if item.completed else " "
            console.print(f"{number}: [{marker}] {item.text}", markup=False)
        return

    if not view.items:
        console.print(f"[dim]No items in {view.active_context.label}[/dim]")
        return

    table = Table(title=view.active_context.label)
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Done", style="green")
    table.add_column("To Do", style="white")

    for number, item in enumerate(view.items, 1):
        text = escape(item.text)
        table.add_row(
            str(number),
            "x" if item.completed else "",
            f"[strike dim]{text}[/strike dim]" if item.completed else text,
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(view.items)} item(s)[/dim]")


@app.command()
def done(
    ref: str = typer.Argument(..., help="Row number from 'ls' or item id"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Toggle an item between done and not done.

    Example:
        worktravel done 2
    """
    screen = load_screen()
    item = screen.resolve(ref)
    if item is None:
        fail(f"No item {ref} in {screen.store.active_context.label}")

    screen.toggle(item.id)
    if screen.notice:
        fail(screen.notice)

    if json_output:
        console.print(item.to_json(), markup=False, soft_wrap=True)
    elif item.completed:
        console.print(f"[green]Completed:[/green] {escape(item.text)}")
    else:
        console.print(f"[yellow]Reopened:[/yellow] {escape(item.text)}")


@app.command()
def rm(
    ref: str = typer.Argument(..., help="Row number from 'ls' or item id"),
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip confirmation prompt"),
):
    """
    Delete an item (asks for confirmation).

    Example:
        worktravel rm 2
        worktravel rm 2 --yes
    """
    screen = load_screen()
    item = screen.resolve(ref)
    if item is None:
        fail(f"No item {ref} in {screen.store.active_context.label}")

    screen.request_delete(item.id)

    if not yes:
        console.print(f"[bold]{CONFIRM_DELETE_TITLE}[/bold]: {escape(item.text)}")
        if not typer.confirm(CONFIRM_DELETE_MESSAGE, default=False):
            screen.cancel_delete()
            console.print("[yellow]Cancelled[/yellow]")
            return

    deleted = screen.confirm_delete()
    if screen.notice:
        fail(screen.notice)

    if deleted:
        console.print(f"[green]Deleted:[/green] {escape(item.text)}")


@app.command()
def edit(
    ref: str = typer.Argument(..., help="Row number from 'ls' or item id"),
):
    """Edit an item (not available yet)."""
    screen = load_screen()
    item = screen.resolve(ref)
    if item is None:
        fail(f"No item {ref} in {screen.store.active_context.label}")

    screen.edit(item.id)
    console.print("[yellow]Editing is not available yet[/yellow]")
