"""
FILE: worktravel/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .items import (
    add,
    ls,
    done,
    rm,
    edit,
)
from .system import (
    version,
    mode,
    repl,
)

__all__ = [
    "add",
    "ls",
    "done",
    "rm",
    "edit",
    "version",
    "mode",
    "repl",
]
