"""
Pytest configuration and shared fixtures for Dex tests.

This module provides common fixtures used across test modules,
including sample records, bundled-resource directories, and stores.
"""

import json
import pytest
from datetime import datetime, timedelta, timezone

from dex.core.models import Pokemon
from dex.storage.engine import InMemoryRecordStore


# =============================================================================
# Sample Data Fixtures
# =============================================================================

SAMPLE_PAYLOAD = {
    "name": "bulbasaur",
    "types": ["grass", "poison"],
    "image_reference": "bulbasaur.png",
}


@pytest.fixture
def sample_payload():
    """The minimal serialized record, with snake_case keys."""
    return dict(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_record():
    """A decoded bulbasaur."""
    return Pokemon(
        name="bulbasaur",
        types=["grass", "poison"],
        image_reference="bulbasaur.png",
    )


@pytest.fixture
def other_record():
    """A second, different record."""
    return Pokemon(
        name="charmander",
        types=["fire"],
        image_reference="charmander.png",
        id=4,
        hp=39,
        special_attack=60,
    )


@pytest.fixture
def now():
    """A fixed instant so timelines are reproducible."""
    return datetime(2025, 8, 12, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def hour():
    return timedelta(hours=1)


# =============================================================================
# Resource Fixtures
# =============================================================================

@pytest.fixture
def resources_dir(tmp_path, sample_payload):
    """A resources directory holding a valid samplepokemon.json."""
    (tmp_path / "samplepokemon.json").write_text(json.dumps(sample_payload), encoding="utf-8")
    return tmp_path


@pytest.fixture
def write_resource(tmp_path):
    """Write arbitrary content as samplepokemon.json and return the directory."""
    def _write(content):
        if not isinstance(content, str):
            content = json.dumps(content)
        (tmp_path / "samplepokemon.json").write_text(content, encoding="utf-8")
        return tmp_path
    return _write


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def memory_store():
    """An empty in-memory store."""
    store = InMemoryRecordStore()
    yield store
    store.clear()


@pytest.fixture
def sqlite_store(tmp_path):
    """An empty SQLite store in a temporary directory."""
    from dex.storage.sqlite import SQLiteRecordStore

    store = SQLiteRecordStore(tmp_path / "dex.db")
    yield store
    store.close()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that wire several layers together"
    )
