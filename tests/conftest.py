"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from worktravel.core.exceptions import StorageUnavailable  # noqa: E402
from worktravel.core.persistence import PersistenceGateway  # noqa: E402
from worktravel.core.store import ItemIdFactory, TaskStore  # noqa: E402


class MemoryStorage:
    """
    In-memory key-value substrate.

    - Records every write for assertions
    - Can be told to fail reads or writes
    """

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})
        self.writes: List[str] = []
        self.fail_reads = False
        self.fail_writes = False
        self.on_read: Optional[Callable[[str], None]] = None

    def get_item(self, key: str) -> Optional[str]:
        if self.on_read is not None:
            self.on_read(key)
        if self.fail_reads:
            raise StorageUnavailable(key, "read")
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageUnavailable(key, "write")
        self.writes.append(key)
        self.data[key] = value


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def frozen_ids() -> ItemIdFactory:
    """Id factory whose clock never moves (every item created in the same millisecond)."""
    return ItemIdFactory(clock=lambda: 1700000000000)


@pytest.fixture()
def store(storage, frozen_ids) -> TaskStore:
    task_store = TaskStore(PersistenceGateway(storage), id_factory=frozen_ids)
    task_store.load()
    return task_store
