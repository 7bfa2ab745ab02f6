"""
Snapshot timeline generation.

The generator turns "what is the current record?" into a batch of future
snapshots for a surface that pulls instead of receiving live updates.

Key Concepts:
    - Timestamps: now, now + interval, ..., now + (count - 1) * interval
    - Content: the placeholder until a record is resolvable, then the
      record's projection; read through the store on every call
    - Stateless: no memory of past timelines, no caching between calls

Usage:
    ```python
    generator = TimelineGenerator(store)
    timeline = generator.generate(now, count=5, interval=timedelta(hours=1))
    ```
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from dex.core.models import Pokemon
from dex.storage.engine import RecordStore
from dex.timeline.models import ContentMode, ReloadPolicy, SnapshotEntry, Timeline
from dex.timeline.placeholders import placeholder as default_placeholder


logger = logging.getLogger(__name__)


# Builds the fallback entry for a timestamp
PlaceholderFactory = Callable[[Optional[datetime]], SnapshotEntry]


class TimelineGenerator:
    """
    Produces finite, strictly ordered timelines of snapshot entries.

    Attributes:
        store: Where records are read from (None = always placeholder)
        content_mode: REPEAT the latest record or ROTATE through all of them
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        content_mode: ContentMode = ContentMode.REPEAT,
        placeholder_factory: PlaceholderFactory = default_placeholder,
    ):
        self.store = store
        self.content_mode = content_mode
        self._placeholder_factory = placeholder_factory

    def placeholder(self, now: Optional[datetime] = None) -> SnapshotEntry:
        """Return the placeholder entry immediately, without touching the store."""
        return self._placeholder_factory(now)

    def _resolve_records(self) -> list[Pokemon]:
        """Read the currently available records. Never blocks or waits."""
        if self.store is None:
            return []
        return self.store.fetch_all()

    def _entry_for(self, index: int, timestamp: datetime, records: list[Pokemon]) -> SnapshotEntry:
        if not records:
            return self._placeholder_factory(timestamp)
        if self.content_mode == ContentMode.ROTATE:
            return SnapshotEntry.from_record(records[index % len(records)], timestamp)
        return SnapshotEntry.from_record(records[-1], timestamp)

    def generate(self, now: datetime, count: int, interval: timedelta) -> Timeline:
        """
        Generate a timeline of `count` entries spaced by `interval`.

        Args:
            now: Timestamp of the first entry
            count: Number of entries, at least 1
            interval: Spacing between entries, strictly positive

        Returns:
            Timeline with an AT_END reload policy

        Raises:
            ValueError: If count < 1 or interval <= 0 (programming error)
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        if interval <= timedelta(0):
            raise ValueError(f"interval must be positive, got {interval}")

        records = self._resolve_records()
        if not records:
            logger.debug("No record available yet, using placeholder content")

        entries = tuple(
            self._entry_for(i, now + i * interval, records)
            for i in range(count)
        )
        return Timeline(entries=entries, policy=ReloadPolicy.AT_END)
