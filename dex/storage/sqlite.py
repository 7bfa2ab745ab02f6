"""
SQLite storage backend for Dex.

This module provides a persistent record store using SQLite, for hosts that
want the loaded record to survive a restart.

Schema Design:
    - records: One row per distinct record, JSON-serialized, with a unique
      content hash so duplicate inserts are rejected by the database too
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from dex.core.models import Pokemon
from dex.storage.engine import RecordStore, StoredRecord, StoreError


logger = logging.getLogger(__name__)


class SQLiteRecordStore(RecordStore):
    """
    SQLite-based record store.

    Usage:
        ```python
        store = SQLiteRecordStore("./dex.db")
        store.insert(Pokemon(name="mew", types=["psychic"], image_reference="mew.png"))
        records = store.fetch_all()
        store.close()
        ```

    Thread Safety:
        Writes are serialized via a reentrant lock on a single connection.
    """

    def __init__(self, db_path: str | Path, timeout: float = 30.0):
        """
        Initialize SQLite storage.

        Args:
            db_path: Path to SQLite database file
            timeout: Connection timeout in seconds
        """
        self._db_path = Path(db_path)
        self._timeout = timeout
        self._lock = threading.RLock()
        self._conn: Optional[sqlite3.Connection] = None

        self._init_schema()

    @property
    def db_path(self) -> Path:
        """Location of the database file."""
        return self._db_path

    def _get_connection(self) -> sqlite3.Connection:
        """Get the open connection, creating it on first use."""
        if self._conn is None:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(
                str(self._db_path),
                timeout=self._timeout,
                check_same_thread=False,
            )
            conn.row_factory = sqlite3.Row
            self._conn = conn
        return self._conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database transactions."""
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def _init_schema(self) -> None:
        """Initialize database schema."""
        with self._lock, self._transaction() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS records (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    content_hash TEXT NOT NULL UNIQUE,
                    data TEXT NOT NULL,
                    inserted_at TEXT NOT NULL
                )
            """)

    def _row_to_stored(self, row: sqlite3.Row) -> StoredRecord:
        """Rebuild a stored entry from a row."""
        try:
            record = Pokemon.model_validate_json(row["data"])
        except ValidationError as e:
            raise StoreError(f"Corrupt record row {row['id']} in {self._db_path}") from e
        return StoredRecord(
            record_id=row["id"],
            content_hash=row["content_hash"],
            inserted_at=datetime.fromisoformat(row["inserted_at"]),
            record=record,
        )

    def insert(self, record: Pokemon) -> StoredRecord:
        """
        Insert a record, deduplicating on content hash.

        Returns:
            The new entry, or the existing one when deduplicated
        """
        with self._lock:
            existing = self.get_by_content_hash(record.content_hash)
            if existing is not None:
                logger.debug(f"Record '{record.name}' already stored as {existing.record_id}")
                return existing

            stored = StoredRecord(content_hash=record.content_hash, record=record)
            with self._transaction() as conn:
                conn.execute(
                    "INSERT INTO records (id, content_hash, data, inserted_at) VALUES (?, ?, ?, ?)",
                    (
                        stored.record_id,
                        stored.content_hash,
                        record.model_dump_json(),
                        stored.inserted_at.isoformat(),
                    ),
                )
            logger.debug(f"Stored record '{record.name}' as {stored.record_id} in {self._db_path}")
            return stored

    def get(self, record_id: str) -> Optional[Pokemon]:
        """Get a record by ID."""
        with self._lock:
            row = self._get_connection().execute(
                "SELECT * FROM records WHERE id = ?", (record_id,)
            ).fetchone()
        return self._row_to_stored(row).record if row is not None else None

    def get_by_content_hash(self, content_hash: str) -> Optional[StoredRecord]:
        """Get a stored entry by its content hash."""
        with self._lock:
            row = self._get_connection().execute(
                "SELECT * FROM records WHERE content_hash = ?", (content_hash,)
            ).fetchone()
        return self._row_to_stored(row) if row is not None else None

    def fetch_stored(self) -> list[StoredRecord]:
        """Get every stored entry in insertion order."""
        with self._lock:
            rows = self._get_connection().execute(
                "SELECT * FROM records ORDER BY seq"
            ).fetchall()
        return [self._row_to_stored(row) for row in rows]

    def count(self) -> int:
        """Number of stored records."""
        with self._lock:
            return self._get_connection().execute("SELECT COUNT(*) FROM records").fetchone()[0]

    def clear(self) -> None:
        """Remove every record."""
        with self._lock, self._transaction() as conn:
            conn.execute("DELETE FROM records")

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
