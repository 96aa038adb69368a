"""
FILE: worktravel/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: add "pack the charger"
  - Supports flags: --yes, --json
  - add keeps the raw text after the command word (see ParseResult.text)
  - Case-insensitive command names
  - Apostrophes in unquoted text fall back to plain whitespace split
"""

import shlex
from dataclasses import dataclass, field
from typing import List, Dict

# Commands whose arguments are one free-form text
TEXT_COMMANDS = {"add"}

# Flags that never take a value
BOOLEAN_FLAGS = {"yes"}


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "ls", "done")
        args: Positional arguments (e.g., ["Buy milk"], ["2"])
        flags: Flag arguments as dict (e.g., {"yes": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str | bool] = field(default_factory=dict)
    raw_input: str = ""

    @property
    def text(self) -> str:
        """
        Everything typed after the command word, verbatim (for add).

        Quotes, runs of spaces and --words inside the text are kept.
        Only a single pair of quotes around the whole text is removed.
        """
        parts = self.raw_input.split(None, 1)
        if len(parts) < 2:
            return ""

        rest = parts[1].strip()
        if len(rest) >= 2 and rest[0] == rest[-1] and rest[0] in ("'", '"'):
            inner = rest[1:-1]
            if rest[0] not in inner:
                return inner
        return rest


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Buy milk")
        ParseResult(command="add", args=["Buy", "milk"], flags={})

        >>> parse_command('add "Book hotel"')
        ParseResult(command="add", args=["Book hotel"], flags={})

        >>> parse_command("rm 2 --yes")
        ParseResult(command="rm", args=["2"], flags={"yes": True})

    Notes:
        - Command is always the first token (case-insensitive)
        - Flags start with -- and are boolean unless followed by a value;
          flags in BOOLEAN_FLAGS never take a value
        - Commands in TEXT_COMMANDS get no flag parsing
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        # Unclosed quote, e.g. "add don't forget"
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    command = tokens[0].lower()

    # Free text: no flag parsing, the handler reads .text
    if command in TEXT_COMMANDS:
        return ParseResult(command=command, args=tokens[1:], raw_input=input_str)

    args = []
    flags = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if token.startswith("--") and len(token) > 2:
            flag_name = token[2:]

            if flag_name in BOOLEAN_FLAGS:
                flags[flag_name] = True
                i += 1
            elif i + 1 < len(tokens) and not tokens[i + 1].startswith("--"):
                flags[flag_name] = tokens[i + 1]
                i += 2
            else:
                flags[flag_name] = True
                i += 1
        else:
            args.append(token)
            i += 1

    return ParseResult(
        command=command,
        args=args,
        flags=flags,
        raw_input=input_str
    )
