"""
Record store for Dex.

This module provides the storage abstraction layer, enabling pluggable
backends while maintaining consistent semantics:

- Deduplicating: Inserting a record equal to a stored one is a no-op
- Ordered: Records are returned in insertion order
- Content-addressable: Records can be looked up by content hash

Design Philosophy:
    The store is the one shared resource in the application. The loader
    writes to it once; the timeline generator and renderers read from it.
    Records are immutable, so readers never see a half-written value.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from threading import RLock
from typing import Optional

from pydantic import BaseModel, Field

from dex.core.models import Pokemon, generate_id


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Error reading from or writing to a record store."""
    pass


class StoredRecord(BaseModel):
    """A record together with the bookkeeping the store assigned to it."""

    record_id: str = Field(default_factory=generate_id, description="Store-assigned identifier")
    content_hash: str = Field(..., description="Content hash used for deduplication")
    inserted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the record was inserted"
    )
    record: Pokemon = Field(..., description="The stored record")

    model_config = {"frozen": True, "extra": "forbid"}


class RecordStore(ABC):
    """
    Abstract base class for record store backends.

    Implementations:
        - InMemoryRecordStore: Previews, tests, and the default app store
        - SQLiteRecordStore: Durable single-file persistence
    """

    @abstractmethod
    def insert(self, record: Pokemon) -> StoredRecord:
        """
        Insert a record unless an equal one is already stored.

        Args:
            record: Record to insert

        Returns:
            The new entry, or the existing one when deduplicated
        """
        pass

    @abstractmethod
    def get(self, record_id: str) -> Optional[Pokemon]:
        """
        Retrieve a record by its store-assigned identifier.

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    def get_by_content_hash(self, content_hash: str) -> Optional[StoredRecord]:
        """Retrieve a stored entry by content hash."""
        pass

    @abstractmethod
    def fetch_stored(self) -> list[StoredRecord]:
        """Get every stored entry in insertion order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every record."""
        pass

    def fetch_all(self) -> list[Pokemon]:
        """Get every record in insertion order."""
        return [stored.record for stored in self.fetch_stored()]

    def latest(self) -> Optional[Pokemon]:
        """Get the most recently inserted record, if any."""
        records = self.fetch_all()
        return records[-1] if records else None

    def contains(self, record: Pokemon) -> bool:
        """Check whether a record with equal content is stored."""
        return self.get_by_content_hash(record.content_hash) is not None

    def count(self) -> int:
        """Number of stored records."""
        return len(self.fetch_stored())

    def close(self) -> None:
        """Release backend resources. In-memory stores have none."""
        pass


class InMemoryRecordStore(RecordStore):
    """
    In-memory store implementation.

    This implementation stores all data in memory using dictionaries.
    Data is lost when the process exits.

    Thread Safety:
        This implementation is thread-safe using a reentrant lock.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._lock = RLock()

        # record_id -> entry, in insertion order
        self._records: dict[str, StoredRecord] = {}

        # Index by content hash: hash -> record_id
        self._content_index: dict[str, str] = {}

    def insert(self, record: Pokemon) -> StoredRecord:
        """Insert a record, deduplicating on content hash."""
        content_hash = record.content_hash
        with self._lock:
            existing_id = self._content_index.get(content_hash)
            if existing_id is not None:
                logger.debug(f"Record '{record.name}' already stored as {existing_id}")
                return self._records[existing_id]

            stored = StoredRecord(content_hash=content_hash, record=record)
            self._records[stored.record_id] = stored
            self._content_index[content_hash] = stored.record_id
            logger.debug(f"Stored record '{record.name}' as {stored.record_id}")
            return stored

    def get(self, record_id: str) -> Optional[Pokemon]:
        """Get a record by ID."""
        with self._lock:
            stored = self._records.get(record_id)
            return stored.record if stored is not None else None

    def get_by_content_hash(self, content_hash: str) -> Optional[StoredRecord]:
        """Get a stored entry by its content hash."""
        with self._lock:
            record_id = self._content_index.get(content_hash)
            if record_id is None:
                return None
            return self._records[record_id]

    def fetch_stored(self) -> list[StoredRecord]:
        """Get every stored entry in insertion order."""
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        """Number of stored records."""
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        """Clear all data (for testing)."""
        with self._lock:
            self._records.clear()
            self._content_index.clear()
