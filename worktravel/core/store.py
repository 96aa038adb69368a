"""
FILE: worktravel/core/store.py
PURPOSE: Authoritative in-memory state and the only legal mutation paths
EXPORTS:
  - ItemIdFactory (class)
  - TaskStore (class)
DEPENDENCIES:
  - time (for millisecond timestamps)
  - types.MappingProxyType (read-only collection view)
  - worktravel.core.models (Item, Context, Collection)
  - worktravel.core.persistence (PersistenceGateway)
  - worktravel.core.exceptions (DeserializationError, StorageUnavailable)
NOTES:
  - Empty text and unknown ids are silent no-ops, never errors
  - Every mutation updates memory first, then saves the whole concern;
    a StorageUnavailable from the save propagates but memory stays updated
  - list_visible() never touches the gateway
  - load() falls back to defaults on corrupt or unreadable storage
"""

import logging
import time
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, Optional

from .exceptions import DeserializationError, StorageUnavailable
from .models import Item, Context, Collection, DEFAULT_CONTEXT
from .persistence import PersistenceGateway

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ItemIdFactory:
    """
    Issues item ids derived from the creation timestamp in milliseconds.

    Ids strictly increase: if the clock has not moved past the last issued
    id, the next id is last + 1.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _now_ms
        self._last = 0

    def seed(self, existing_ids: Iterable[str]) -> None:
        """Make sure future ids sort after every numeric id already in use."""
        for item_id in existing_ids:
            try:
                value = int(item_id)
            except ValueError:
                continue
            self._last = max(self._last, value)

    def next_id(self) -> str:
        candidate = self._clock()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)


class TaskStore:
    """
    Holds the item collection and the active context.

    Constructed once at application start with a PersistenceGateway and
    passed by reference to whatever renders it.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        id_factory: Optional[ItemIdFactory] = None,
    ) -> None:
        self._gateway = gateway
        self._ids = id_factory or ItemIdFactory()
        self._items: Collection = {}
        self._active_context: Context = DEFAULT_CONTEXT

    # ---- read access ----

    @property
    def active_context(self) -> Context:
        return self._active_context

    @property
    def items(self) -> Mapping[str, Item]:
        return MappingProxyType(self._items)

    def get_item(self, item_id: str) -> Optional[Item]:
        return self._items.get(item_id)

    def count(self, context: Context) -> int:
        return sum(1 for item in self._items.values() if item.context is context)

    def list_visible(self) -> Iterator[Item]:
        """
        Items whose context equals the active context.

        Returns a fresh generator on every call, in creation order.
        """
        active = self._active_context
        snapshot = list(self._items.values())
        return (item for item in snapshot if item.context is active)

    # ---- startup ----

    def load(self) -> None:
        """
        Load collection and active context from the gateway.

        Corrupt or unreadable values are replaced by defaults
        (empty collection, Work) so startup never blocks.
        """
        try:
            items = self._gateway.load_collection()
        except DeserializationError as e:
            logger.warning("Discarding stored items: %s", e)
            items = {}
        except StorageUnavailable as e:
            logger.error("Could not load items, starting empty: %s", e)
            items = {}

        try:
            context = self._gateway.load_context()
        except DeserializationError as e:
            logger.warning("Discarding stored mode: %s", e)
            context = DEFAULT_CONTEXT
        except StorageUnavailable as e:
            logger.error("Could not load mode, using %s: %s", DEFAULT_CONTEXT.value, e)
            context = DEFAULT_CONTEXT

        self._items = dict(items)
        self._active_context = context
        self._ids.seed(self._items.keys())
        logger.info("TaskStore ready items=%s mode=%s", len(self._items), context.value)

    # ---- mutations ----

    def set_active_context(self, context: Context) -> None:
        self._active_context = context
        self._gateway.save_context(context)

    def add_item(self, text: str) -> Optional[Item]:
        """
        Create an item in the active context.

        Args:
            text: Item text; surrounding whitespace is stripped

        Returns:
            The new Item, or None if text was empty (nothing mutated or saved)
        """
        text = (text or "").strip()
        if not text:
            return None

        item = Item(
            id=self._ids.next_id(),
            text=text,
            context=self._active_context,
        )
        self._items[item.id] = item
        logger.debug("Item added id=%s mode=%s", item.id, item.context.value)

        self._gateway.save_collection(self._items)
        return item

    def toggle_completed(self, item_id: str) -> Optional[Item]:
        """Flip completed on an item. Unknown ids return None."""
        item = self._items.get(item_id)
        if item is None:
            return None

        item.completed = not item.completed
        self._gateway.save_collection(self._items)
        return item

    def delete_item(self, item_id: str, confirm: Callable[[Item], bool]) -> bool:
        """
        Delete an item after a blocking confirmation.

        Args:
            item_id: Id of the item to delete
            confirm: Called with the item; must return True to proceed

        Returns:
            True if the item was removed. Unknown ids return False
            without calling confirm.
        """
        item = self._items.get(item_id)
        if item is None:
            return False

        if not confirm(item):
            return False

        del self._items[item_id]
        logger.debug("Item deleted id=%s", item_id)

        self._gateway.save_collection(self._items)
        return True
