"""
FILE: worktravel/repl/style.py
PURPOSE: Small feedback messages for REPL actions
EXPORTS:
  - celebrate_add() -> str
  - celebrate_done() -> str
  - celebrate_delete() -> str
DEPENDENCIES:
  - random (for variety)
NOTES:
  - Subtle, one line, shown dimmed after the action message
"""

import random


ADD_CELEBRATIONS = [
    "+ *noted* +",
    "o *logged* o",
    "* *captured* *",
]

DONE_CELEBRATIONS = [
    "* *sparkle* *",
    "~ *shine* ~",
    "! *pop* !",
]

DELETE_ANIMATIONS = [
    "x *removed* x",
    "- *cleared* -",
    ". *gone* .",
]


def celebrate_add() -> str:
    """Return a random message for adding an item."""
    return random.choice(ADD_CELEBRATIONS)


def celebrate_done() -> str:
    """Return a random message for completing an item."""
    return random.choice(DONE_CELEBRATIONS)


def celebrate_delete() -> str:
    return random.choice(DELETE_ANIMATIONS)
