"""
FILE: worktravel/core/repository.py
PURPOSE: String-valued key-value storage on a local SQLite file
EXPORTS:
  - get_connection() -> Connection
  - init_database(conn) -> None
  - get_item(key) -> str | None
  - set_item(key, value) -> None
  - remove_item(key) -> None
  - list_keys() -> List[str]
DEPENDENCIES:
  - sqlite3 (stdlib)
  - pathlib (stdlib)
  - datetime (stdlib)
  - os (stdlib)
  - worktravel.core.exceptions (StorageUnavailable)
NOTES:
  - Database stored at $WORKTRAVEL_HOME/worktravel.db (default ~/.worktravel)
  - Auto-creates directory and table on first connection
  - set_item() is an upsert: every write replaces the whole value for a key
  - Each call opens and closes its own connection
  - sqlite3.Error and OSError surface as StorageUnavailable
"""

import logging
import os
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .exceptions import StorageUnavailable

logger = logging.getLogger(__name__)


def _data_dir() -> Path:
    raw = os.environ.get("WORKTRAVEL_HOME")
    if raw is None or raw.strip() == "":
        return Path.home() / ".worktravel"
    return Path(raw).expanduser()


# Database file location (cross-platform)
DB_DIR = _data_dir()
DB_PATH = DB_DIR / "worktravel.db"


def get_connection() -> sqlite3.Connection:
    """
    Get SQLite connection to the key-value database.

    Creates the data directory if it doesn't exist.
    Initializes the storage table on first connection.
    """
    DB_DIR.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row

    init_database(conn)

    return conn


def init_database(conn: sqlite3.Connection) -> None:
    """
    Create the storage table if it doesn't exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    """
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS storage (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """
    )
    conn.commit()


def get_item(key: str) -> Optional[str]:
    """
    Read the value stored under key.

    Returns:
        Stored string if present, None otherwise

    Raises:
        StorageUnavailable: If the database cannot be opened or read
    """
    try:
        conn = get_connection()
        try:
            row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
    except (sqlite3.Error, OSError) as e:
        raise StorageUnavailable(key, "read", e) from e

    return row["value"] if row else None


def set_item(key: str, value: str) -> None:
    """
    Store value under key, overwriting any prior value.

    Raises:
        StorageUnavailable: If the database cannot be opened or written
    """
    now = datetime.now().isoformat()

    try:
        conn = get_connection()
        try:
            conn.execute(
                """
                INSERT INTO storage (key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, now),
            )
            conn.commit()
        finally:
            conn.close()
    except (sqlite3.Error, OSError) as e:
        raise StorageUnavailable(key, "write", e) from e

    logger.debug("Stored key=%s bytes=%s", key, len(value))


def remove_item(key: str) -> None:
    """
    Delete key. Removing a missing key is a no-op.

    Raises:
        StorageUnavailable: If the database cannot be opened or written
    """
    try:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM storage WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()
    except (sqlite3.Error, OSError) as e:
        raise StorageUnavailable(key, "remove", e) from e


def list_keys() -> List[str]:
    """
    List all stored keys.

    Returns:
        Keys in alphabetical order
    """
    try:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT key FROM storage ORDER BY key").fetchall()
        finally:
            conn.close()
    except (sqlite3.Error, OSError) as e:
        raise StorageUnavailable(None, "list", e) from e

    return [row["key"] for row in rows]
