"""
FILE: worktravel/repl/main.py
PURPOSE: Interactive REPL for the two-context to-do screen
EXPORTS:
  - main() - Entry point for REPL mode
  - run_repl(screen) - Main REPL loop
  - execute_command(result, screen) - Dispatch one parsed command
  - format_prompt(screen) / plain_prompt(screen) - Prompt text
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - worktravel.core.screen (view model and store)
  - worktravel.repl.parser (command parsing)
  - worktravel.repl.completer (autocomplete)
NOTES:
  - The screen is built once in main() and passed to every handler
  - Bottom toolbar shows item counts per context
  - Prompt shows the active context ("work> " / "travel> ")
  - Falls back to plain input() when stdin/stdout is not a TTY
  - Ctrl+D or "exit"/"quit" to exit
"""

import sys
import traceback

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    if not isinstance(sys.stdout, io.TextIOWrapper) or sys.stdout.encoding != 'utf-8':
        try:
            sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.markup import escape

from ..core.models import Context
from ..core.screen import TodoScreen, open_screen
from .parser import parse_command, ParseResult
from .completer import create_completer
from .display import console, display_header, display_items_table
from .commands import (
    handle_add_command,
    handle_ls_command,
    handle_done_command,
    handle_rm_command,
    handle_edit_command,
    handle_work_command,
    handle_travel_command,
    handle_mode_command,
    handle_help_command,
    handle_clear_command,
)

HANDLERS = {
    "add": handle_add_command,
    "ls": handle_ls_command,
    "done": handle_done_command,
    "rm": handle_rm_command,
    "edit": handle_edit_command,
    "work": handle_work_command,
    "travel": handle_travel_command,
    "mode": handle_mode_command,
    "help": handle_help_command,
    "clear": handle_clear_command,
}


def plain_prompt(screen: TodoScreen) -> str:
    return f"{screen.store.active_context.value}> "


def format_prompt(screen: TodoScreen) -> HTML:
    """Colored prompt: white for Work, cyan for Travel."""
    context = screen.store.active_context
    color = "ansiwhite" if context is Context.WORK else "ansicyan"
    return HTML(f"<b><{color}>{context.value}</{color}>&gt; </b>")


def make_bottom_toolbar(screen: TodoScreen):
    """Build the toolbar callback showing counts per context."""

    def get_bottom_toolbar() -> HTML:
        store = screen.store
        work = store.count(Context.WORK)
        travel = store.count(Context.TRAVEL)
        placeholder = store.active_context.placeholder
        return HTML(
            f"<style bg='#444444' fg='#ffffff'> Work {work} | Travel {travel} | "
            f"{placeholder} </style>"
        )

    return get_bottom_toolbar


def execute_command(result: ParseResult, screen: TodoScreen) -> bool:
    """
    Execute a parsed command.

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    if not command:
        return True

    handler = HANDLERS.get(command)
    if handler:
        handler(result, screen)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {escape(command)}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(screen: TodoScreen) -> None:
    """
    Main REPL loop.

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(screen),
                complete_while_typing=True,
                bottom_toolbar=make_bottom_toolbar(screen),
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]worktravel REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    view = screen.render()
    display_header(view.active_context)
    display_items_table(view.items)
    console.print()

    while True:
        try:
            if use_simple_input or session is None:
                user_input = input(plain_prompt(screen))
            else:
                user_input = session.prompt(lambda: format_prompt(screen))

            result = parse_command(user_input)

            if not execute_command(result, screen):
                break

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            console.print("[dim]Goodbye![/dim]")
            break
        except Exception as e:
            # Unexpected error - show but don't crash
            console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
            console.print("[dim]" + escape(traceback.format_exc()) + "[/dim]")


def main(screen: TodoScreen = None) -> None:
    """
    Entry point for REPL mode.

    Called when user runs: worktravel (or worktravel repl)
    """
    try:
        if screen is None and console.is_terminal:
            with console.status("Loading..."):
                screen = open_screen()
        elif screen is None:
            screen = open_screen()
        run_repl(screen)
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
