"""
Storage layer for Dex.

Provides pluggable record stores, with the default in-memory implementation
and a SQLite backend. Factories live in `dex.storage.factory`.
"""

from dex.storage.engine import RecordStore, InMemoryRecordStore, StoredRecord, StoreError
from dex.storage.sqlite import SQLiteRecordStore

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
    "SQLiteRecordStore",
    "StoredRecord",
    "StoreError",
]
