"""
FILE: worktravel/core/screen.py
PURPOSE: Event-facing view model between a UI and the TaskStore
EXPORTS:
  - ScreenView (dataclass, rendered view model)
  - TodoScreen (class)
  - open_screen(storage) -> TodoScreen
DEPENDENCIES:
  - worktravel.core.store (TaskStore)
  - worktravel.core.persistence (PersistenceGateway)
  - worktravel.core.models (Item, Context)
  - worktravel.core.exceptions (StorageUnavailable)
NOTES:
  - Owns UI-side state: pending input text, pending deletion, loading flag,
    and a transient notice
  - A failed save becomes a notice; in-memory state is kept
  - Every event clears the previous notice
  - edit() is an extension point with no behavior yet
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import StorageUnavailable
from .models import Item, Context
from .persistence import PersistenceGateway
from .store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class ScreenView:
    """Everything a UI needs to draw the screen."""

    active_context: Context
    pending_text: str
    placeholder: str
    items: List[Item] = field(default_factory=list)
    loading: bool = False
    notice: Optional[str] = None
    pending_delete: Optional[Item] = None


class TodoScreen:
    """
    Translates UI events into TaskStore operations.

    Attributes:
        store: The TaskStore this screen renders
        pending_text: Current contents of the input field
        loading: True only while start() is loading state
        notice: Message about the last failed save, if any
    """

    def __init__(self, store: TaskStore) -> None:
        self.store = store
        self.pending_text = ""
        self.loading = False
        self.notice: Optional[str] = None
        self._pending_delete: Optional[str] = None

    def start(self) -> None:
        self.loading = True
        try:
            self.store.load()
        finally:
            self.loading = False

    # ---- events ----

    def switch_context(self, context: Context) -> None:
        self.notice = None
        self._run_save(lambda: self.store.set_active_context(context))

    def change_text(self, text: str) -> None:
        self.pending_text = text

    def submit(self) -> Optional[Item]:
        """
        Add the pending text as an item.

        The input is cleared only once the item has been saved.
        """
        self.notice = None
        try:
            item = self.store.add_item(self.pending_text)
        except StorageUnavailable as e:
            self._report(e)
            return None

        if item is not None:
            self.pending_text = ""
        return item

    def request_delete(self, item_id: str) -> Optional[Item]:
        """Ask for confirmation before deleting. Nothing is removed yet."""
        self.notice = None
        item = self.store.get_item(item_id)
        self._pending_delete = item.id if item is not None else None
        return item

    def confirm_delete(self) -> bool:
        """
        Delete the pending item.

        Returns True once the item is gone from memory, even if the
        save failed (the failure is reported as a notice).
        """
        self.notice = None
        item_id = self._pending_delete
        self._pending_delete = None
        if item_id is None or item_id not in self.store.items:
            return False

        self._run_save(lambda: self.store.delete_item(item_id, confirm=lambda _item: True))
        return item_id not in self.store.items

    def cancel_delete(self) -> None:
        self.notice = None
        self._pending_delete = None

    def toggle(self, item_id: str) -> Optional[Item]:
        self.notice = None
        item = self.store.get_item(item_id)
        if item is None:
            return None
        self._run_save(lambda: self.store.toggle_completed(item_id))
        return item

    def edit(self, item_id: str) -> None:
        # Extension point: editing has no defined behavior.
        logger.debug("Edit requested for id=%s (not supported)", item_id)

    # ---- lookups ----

    def resolve(self, ref: str) -> Optional[Item]:
        """
        Find a visible item by 1-based row number or by id.

        Row numbers follow render() order. Items of the other context
        never match.
        """
        ref = (ref or "").strip().lstrip("#")
        if not ref:
            return None

        visible = list(self.store.list_visible())

        # Row numbers are short; ids are millisecond timestamps
        if ref.isdecimal() and 1 <= int(ref) <= len(visible):
            return visible[int(ref) - 1]

        for item in visible:
            if item.id == ref:
                return item
        return None

    # ---- rendering ----

    @property
    def pending_delete(self) -> Optional[Item]:
        if self._pending_delete is None:
            return None
        return self.store.get_item(self._pending_delete)

    def render(self) -> ScreenView:
        context = self.store.active_context
        return ScreenView(
            active_context=context,
            pending_text=self.pending_text,
            placeholder=context.placeholder,
            items=list(self.store.list_visible()),
            loading=self.loading,
            notice=self.notice,
            pending_delete=self.pending_delete,
        )

    # ---- helpers ----

    def _run_save(self, operation) -> None:
        try:
            operation()
        except StorageUnavailable as e:
            self._report(e)

    def _report(self, error: StorageUnavailable) -> None:
        logger.warning("Save failed, keeping changes in memory: %s", error)
        self.notice = f"Could not save changes: {error}"


def open_screen(storage=None) -> TodoScreen:
    """
    Build gateway, store and screen, and load saved state.

    Args:
        storage: Optional key-value substrate (defaults to the SQLite repository)
    """
    store = TaskStore(PersistenceGateway(storage))
    screen = TodoScreen(store)
    screen.start()
    return screen
