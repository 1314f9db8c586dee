"""Key-value storage backends and initialization."""

import logging
import os
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"

DB_FILENAME = "fitness_tracker.db"


class StorageError(Exception):
    """Base class for failures of the underlying storage medium."""


class StorageUnavailableError(StorageError):
    """The storage medium could not be read or written."""


class StorageQuotaExceededError(StorageError):
    """A write was rejected because the store is full."""


class KeyValueBackend(ABC):
    """String-keyed store of string values.

    ``set`` replaces a key's whole value in one step; readers never observe
    a partially written value.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove ``key``. Missing keys are ignored."""

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys."""


class MemoryBackend(KeyValueBackend):
    """In-process backend, optionally limited to ``quota`` characters.

    The quota counts key and value lengths of every entry, like the
    per-origin limit of browser local storage.
    """

    def __init__(self, quota: int | None = None):
        self.quota = quota
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota is not None:
            used = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
            if used + len(key) + len(value) > self.quota:
                raise StorageQuotaExceededError(
                    f"Writing {len(value)} characters to '{key}' exceeds quota of {self.quota}"
                )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class SQLiteBackend(KeyValueBackend):
    """Backend persisting keys to a single-table SQLite file."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def get(self, key: str) -> str | None:
        try:
            conn = self._connect()
            try:
                row = conn.execute(
                    "SELECT value FROM local_storage WHERE key = ?", (key,)
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Could not read '{key}': {e}") from e
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._connect()
            try:
                conn.execute(
                    """
                    INSERT INTO local_storage (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (key, value),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Could not write '{key}': {e}") from e

    def remove(self, key: str) -> None:
        try:
            conn = self._connect()
            try:
                conn.execute("DELETE FROM local_storage WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Could not remove '{key}': {e}") from e

    def keys(self) -> list[str]:
        try:
            conn = self._connect()
            try:
                rows = conn.execute("SELECT key FROM local_storage ORDER BY key").fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Could not list keys: {e}") from e
        return [row[0] for row in rows]


def get_data_dir() -> Path:
    """Get the data directory, honoring FITNESS_TRACKER_DATA_DIR."""
    override = os.environ.get("FITNESS_TRACKER_DATA_DIR")
    return Path(override).expanduser() if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    conn = sqlite3.connect(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS local_storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()
    finally:
        conn.close()
    logger.debug("Initialized local storage at %s", db_path)
