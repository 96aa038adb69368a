"""
FILE: worktravel/core/models.py
PURPOSE: Domain models for contexts and to-do items
EXPORTS:
  - Context (enum: WORK, TRAVEL)
  - DEFAULT_CONTEXT
  - Item (dataclass)
  - Collection (type alias: Dict[str, Item])
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - json (stdlib)
  - typing (stdlib)
  - worktravel.core.constants (mode strings, field names, labels)
  - worktravel.core.exceptions (DeserializationError)
NOTES:
  - Context is the only representation used inside the app
  - The boolean "working" flag exists only in to_record()/from_record()
  - from_record() validates shape and raises DeserializationError
  - Item has to_json() for CLI output
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
import json

from .constants import (
    MODE_WORK,
    MODE_TRAVEL,
    FIELD_TEXT,
    FIELD_WORKING,
    FIELD_COMPLETED,
    CONTEXT_LABELS,
    CONTEXT_PLACEHOLDERS,
    STORAGE_KEY,
)
from .exceptions import DeserializationError


class Context(str, Enum):
    """One of the two fixed partitions an item and the active mode belong to."""

    WORK = MODE_WORK
    TRAVEL = MODE_TRAVEL

    @classmethod
    def from_mode(cls, mode: str) -> "Context":
        """Map a stored/typed mode string to a Context ("work" or anything else)."""
        return cls.WORK if mode == MODE_WORK else cls.TRAVEL

    @classmethod
    def from_working(cls, working: bool) -> "Context":
        return cls.WORK if working else cls.TRAVEL

    @property
    def working(self) -> bool:
        return self is Context.WORK

    @property
    def label(self) -> str:
        return CONTEXT_LABELS[self.value]

    @property
    def placeholder(self) -> str:
        return CONTEXT_PLACEHOLDERS[self.value]

    def other(self) -> "Context":
        return Context.TRAVEL if self is Context.WORK else Context.WORK


DEFAULT_CONTEXT = Context.WORK


@dataclass
class Item:
    """A to-do entry with text, owning context, and completion state."""

    id: str
    text: str
    context: Context
    completed: bool = False

    def to_record(self) -> Dict[str, Any]:
        """Convert to the stored record shape ({text, working, completed})."""
        return {
            FIELD_TEXT: self.text,
            FIELD_WORKING: self.context.working,
            FIELD_COMPLETED: self.completed,
        }

    @classmethod
    def from_record(cls, item_id: str, record: Any) -> "Item":
        """
        Build an Item from a stored record.

        Raises:
            DeserializationError: If the id or record does not have the stored shape
        """
        if not isinstance(item_id, str) or not item_id:
            raise DeserializationError(STORAGE_KEY, f"invalid item id {item_id!r}")
        if not isinstance(record, dict):
            raise DeserializationError(STORAGE_KEY, f"item {item_id} is not an object")

        text = record.get(FIELD_TEXT)
        working = record.get(FIELD_WORKING)
        completed = record.get(FIELD_COMPLETED)

        if not isinstance(text, str):
            raise DeserializationError(STORAGE_KEY, f"item {item_id} has no text")
        if not isinstance(working, bool):
            raise DeserializationError(STORAGE_KEY, f"item {item_id} has no working flag")
        if not isinstance(completed, bool):
            raise DeserializationError(STORAGE_KEY, f"item {item_id} has no completed flag")

        return cls(
            id=item_id,
            text=text,
            context=Context.from_working(working),
            completed=completed,
        )

    def to_json(self) -> str:
        """Serialize item to JSON string."""
        return json.dumps(
            {
                "id": self.id,
                "text": self.text,
                "context": self.context.value,
                "completed": self.completed,
            },
            indent=2,
            ensure_ascii=False,
        )


# Mapping from item id to Item
Collection = Dict[str, Item]
