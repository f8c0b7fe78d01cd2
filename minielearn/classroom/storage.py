"""
Key-value storage backends for persisted progress.

The progress store only needs three string operations against a single
key, so any backend implementing KeyValueStorage can hold the table:
- MemoryStorage: in-process dict (tests, ephemeral sessions)
- SqliteStorage: ~/.minielearn/progress.db, survives restarts
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol

from .errors import StorageReadError, StorageWriteError


logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_DIR = Path.home() / ".minielearn"
DEFAULT_PROGRESS_DB = DEFAULT_PROGRESS_DIR / "progress.db"


class KeyValueStorage(Protocol):
    """String key-value capability consumed by ProgressStore."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryStorage:
    """Dict-backed storage. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class SqliteStorage:
    """
    Key-value storage in a SQLite database.

    Each operation opens its own connection, so the same file can be shared
    by several Streamlit sessions; the last write wins.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize storage.

        Args:
            db_path: Path to progress.db (default: ~/.minielearn/progress.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_PROGRESS_DB
        self._ensure_database()

    def _ensure_database(self):
        """
        Create database and table if they don't exist.

        An unusable path is only logged; later reads and writes then fail
        with StorageReadError / StorageWriteError.
        """
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
            try:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                """)
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            logger.warning(f"Progress database unavailable at {self.db_path}: {e}")

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get(self, key: str) -> Optional[str]:
        try:
            conn = self._get_connection()
            try:
                cursor = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
                row = cursor.fetchone()
                return row["value"] if row else None
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageReadError(key, str(e)) from e

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._get_connection()
            try:
                conn.execute(
                    """INSERT INTO kv (key, value) VALUES (?, ?)
                       ON CONFLICT(key) DO UPDATE SET value = excluded.value""",
                    (key, value)
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageWriteError(key, str(e)) from e

    def delete(self, key: str) -> None:
        try:
            conn = self._get_connection()
            try:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageWriteError(key, str(e)) from e
