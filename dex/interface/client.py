"""
Main client interface for Dex.

This module wires configuration, store, loader, generator and widget
provider together.

Usage:
    ```python
    from dex import Dex

    with Dex() as dex:
        pokemon = dex.start()
        timeline = dex.timeline()
    ```
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from dex.config import DexConfig
from dex.core.models import Pokemon
from dex.ingestion.loader import DecodeError, RecordLoader
from dex.storage.engine import RecordStore
from dex.storage.factory import make_store
from dex.timeline.generator import TimelineGenerator
from dex.timeline.models import Timeline
from dex.widget.provider import TimelineProvider


logger = logging.getLogger(__name__)


class StartupError(Exception):
    """The bundled record could not be loaded at startup."""
    pass


class Dex:
    """
    The application: one bundled record and the widget timelines built from it.

    The store is created from `config.store` unless one is passed in. Until
    `start()` succeeds the generator falls back to placeholder content.
    """

    def __init__(self, config: Optional[DexConfig] = None, store: Optional[RecordStore] = None):
        """
        Initialize Dex.

        Args:
            config: Application configuration (defaults throughout when omitted)
            store: Store to use instead of the configured one
        """
        self._config = config or DexConfig()
        self._store = store or make_store(self._config.store)
        self._loader = RecordLoader(
            self._store,
            resource_name=self._config.resource_name,
            resources_dir=self._config.resources_dir,
        )
        self._generator = TimelineGenerator(
            self._store,
            content_mode=self._config.timeline.content_mode,
        )
        self._provider = TimelineProvider(self._generator, self._config.timeline)
        self._record: Optional[Pokemon] = None

    @property
    def config(self) -> DexConfig:
        return self._config

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def generator(self) -> TimelineGenerator:
        return self._generator

    @property
    def provider(self) -> TimelineProvider:
        return self._provider

    @property
    def record(self) -> Optional[Pokemon]:
        """The loaded record, None before `start()`."""
        return self._record

    def start(self) -> Pokemon:
        """
        Load the bundled record into the store.

        Raises:
            StartupError: If the bundled resource is missing or malformed
        """
        try:
            self._record = self._loader.load()
        except DecodeError as e:
            raise StartupError(f"Cannot start Dex: {e}") from e
        return self._record

    def timeline(self, now: Optional[datetime] = None) -> Timeline:
        """Generate a timeline using the configured count and interval."""
        settings = self._config.timeline
        return self._generator.generate(
            now=now or datetime.now(timezone.utc),
            count=settings.entry_count,
            interval=settings.interval,
        )

    def close(self) -> None:
        """Release the store."""
        self._store.close()

    def __enter__(self) -> Dex:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
