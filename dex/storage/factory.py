"""
Store factories.

Stores are created explicitly and handed to whatever needs them; there is
no process-wide preview store.
"""

from __future__ import annotations

from typing import Optional

from dex.config import StoreConfiguration
from dex.core.models import Pokemon
from dex.storage.engine import InMemoryRecordStore, RecordStore
from dex.storage.sqlite import SQLiteRecordStore


def make_in_memory_store(seed_record: Optional[Pokemon] = None) -> RecordStore:
    """Create an in-memory store, optionally holding one record."""
    store = InMemoryRecordStore()
    if seed_record is not None:
        store.insert(seed_record)
    return store


def make_store(
    configuration: Optional[StoreConfiguration] = None,
    seed_record: Optional[Pokemon] = None,
) -> RecordStore:
    """
    Create the store described by a configuration.

    Args:
        configuration: Backing to use (in-memory when omitted)
        seed_record: Record to insert once the store exists

    Returns:
        A ready-to-use store
    """
    configuration = configuration or StoreConfiguration()
    if configuration.stored_in_memory_only:
        return make_in_memory_store(seed_record)

    store = SQLiteRecordStore(configuration.path)
    if seed_record is not None:
        store.insert(seed_record)
    return store
