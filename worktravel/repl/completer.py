"""
FILE: worktravel/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - WorkTravelCompleter (Completer for command/arg completion)
  - create_completer(screen) -> WorkTravelCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
  - worktravel.core.screen (for row numbers of visible items)
NOTES:
  - Suggests command names when at start of line
  - Suggests modes after "mode"
  - Suggests row numbers (with item text as meta) after done/rm/edit
  - Suggests --yes after "rm <n>"
  - Case-insensitive matching
"""

from typing import Iterable, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.screen import TodoScreen


class WorkTravelCompleter(Completer):
    """
    Custom completer for the worktravel REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Mode values after "mode"
    - Row numbers after commands that take an item
    """

    COMMANDS = [
        "add", "ls", "done", "rm", "edit", "work", "travel", "mode",
        "help", "clear", "exit", "quit",
    ]

    MODES = ["work", "travel"]

    COMMAND_FLAGS = {
        "rm": ["--yes"],
    }

    COMMAND_DESCRIPTIONS = {
        "add": "Add an item",
        "ls": "List items",
        "done": "Toggle done",
        "rm": "Delete an item",
        "edit": "Edit an item (not available)",
        "work": "Switch to Work",
        "travel": "Switch to Travel",
        "mode": "Show or set context",
        "help": "Show help",
        "clear": "Clear screen",
        "exit": "Exit REPL",
        "quit": "Exit REPL",
    }

    def __init__(self, screen: Optional[TodoScreen] = None) -> None:
        self.screen = screen

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_space = text_before_cursor.endswith(" ")

        # Empty input or typing the first word -> commands
        if not words or (not at_space and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_commands(word)
            return

        command = words[0].lower()

        if command == "mode":
            if len(words) == 1 and at_space:
                yield from self._complete_modes("")
            elif len(words) == 2 and not at_space:
                yield from self._complete_modes(words[1])
            return

        if command in ("done", "rm", "edit"):
            if len(words) == 1 and at_space:
                yield from self._complete_rows("")
                return
            if len(words) == 2 and not at_space:
                yield from self._complete_rows(words[1])
                return

        last_word = words[-1]
        if last_word.startswith("--") or at_space:
            yield from self._complete_flags(command, "" if at_space else last_word)

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.COMMAND_DESCRIPTIONS.get(command, ""),
                )

    def _complete_modes(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for mode in self.MODES:
            if mode.startswith(word_lower):
                yield Completion(mode, start_position=-len(word), display=mode)

    def _complete_flags(self, command: str, word: str) -> Iterable[Completion]:
        for flag in self.COMMAND_FLAGS.get(command, []):
            if flag.startswith(word.lower()):
                yield Completion(flag, start_position=-len(word), display=flag)

    def _complete_rows(self, word: str) -> Iterable[Completion]:
        """Row numbers of visible items, with the item text as meta."""
        if self.screen is None:
            return

        for number, item in enumerate(self.screen.store.list_visible(), 1):
            row = str(number)
            if row.startswith(word):
                text = item.text if len(item.text) <= 40 else item.text[:37] + "..."
                yield Completion(
                    row,
                    start_position=-len(word),
                    display=row,
                    display_meta=text,
                )


def create_completer(screen: Optional[TodoScreen] = None) -> WorkTravelCompleter:
    """Create completer bound to a screen (row suggestions need one)."""
    return WorkTravelCompleter(screen)
