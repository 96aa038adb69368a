"""
FILE: worktravel/repl/__init__.py
PURPOSE: REPL package for the interactive to-do screen
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
  - worktravel.core.screen (view model)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete and command history
"""

from .main import main

__all__ = ["main"]
