"""
FILE: worktravel/core/persistence.py
PURPOSE: Durable round-trip of the item collection and active context
EXPORTS:
  - PersistenceGateway (class)
  - encode_collection(collection) -> str
  - decode_collection(raw) -> Collection
  - decode_context(raw) -> Context
DEPENDENCIES:
  - json (stdlib)
  - worktravel.core.repository (default key-value substrate)
  - worktravel.core.models (Item, Context, Collection)
  - worktravel.core.exceptions (DeserializationError)
NOTES:
  - Two independent keys: STORAGE_KEY (collection) and MODE_KEY (context)
  - Every save writes one complete value per key, never a partial update
  - Substrate is any object with get_item(key) and set_item(key, value);
    the repository module is used when none is given
  - Stored collection shape: {id: {text, working, completed}}
"""

import json
import logging
from typing import Optional

from . import repository
from .constants import STORAGE_KEY, MODE_KEY
from .exceptions import DeserializationError
from .models import Item, Context, Collection, DEFAULT_CONTEXT

logger = logging.getLogger(__name__)


def encode_collection(collection: Collection) -> str:
    """Serialize the full collection to its stored JSON form."""
    return json.dumps(
        {item_id: item.to_record() for item_id, item in collection.items()},
        ensure_ascii=False,
    )


def decode_collection(raw: str) -> Collection:
    """
    Deserialize a stored collection.

    Raises:
        DeserializationError: If raw is not JSON or any record has the wrong shape
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DeserializationError(STORAGE_KEY, f"not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise DeserializationError(STORAGE_KEY, "expected a JSON object")

    return {item_id: Item.from_record(item_id, record) for item_id, record in data.items()}


def decode_context(raw: str) -> Context:
    """
    Deserialize a stored mode string.

    "work" means Work; any other string means Travel.
    """
    if not isinstance(raw, str):
        raise DeserializationError(MODE_KEY, f"expected a string, got {type(raw).__name__}")
    return Context.from_mode(raw)


class PersistenceGateway:
    """
    Saves and loads TaskStore state through a key-value substrate.

    Errors from the substrate (StorageUnavailable) propagate to the caller.
    """

    def __init__(self, storage=None) -> None:
        self._storage = storage if storage is not None else repository

    def save_collection(self, collection: Collection) -> None:
        raw = encode_collection(collection)
        self._storage.set_item(STORAGE_KEY, raw)
        logger.debug("Saved collection items=%s", len(collection))

    def load_collection(self) -> Collection:
        """
        Load the stored collection.

        Returns:
            Empty collection if nothing has been stored yet

        Raises:
            DeserializationError: If the stored value is malformed
        """
        raw: Optional[str] = self._storage.get_item(STORAGE_KEY)
        if raw is None:
            return {}

        collection = decode_collection(raw)
        logger.info("Loaded collection items=%s", len(collection))
        return collection

    def save_context(self, context: Context) -> None:
        self._storage.set_item(MODE_KEY, context.value)
        logger.debug("Saved context=%s", context.value)

    def load_context(self) -> Context:
        raw = self._storage.get_item(MODE_KEY)
        if raw is None:
            return DEFAULT_CONTEXT
        return decode_context(raw)
