"""
Record Loader - decode the bundled record and materialize it in a store.

The loader reads exactly one resource, converts its snake_case keys to the
in-memory camelCase convention, validates it strictly, and inserts it.

Error handling:
- Missing or unreadable resource -> DecodeError
- Invalid JSON or a non-object document -> DecodeError
- Missing or wrongly-shaped required field -> DecodeError
Unknown extra fields are ignored. There is no partial record and no retry.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from dex.config import DEFAULT_RESOURCE_NAME, RESOURCES_DIR
from dex.core.models import Pokemon
from dex.ingestion.keys import convert_from_snake_case, convert_keys, convert_to_snake_case
from dex.storage.engine import RecordStore

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Bundled record resource is missing or malformed."""
    pass


def decode_record(data: bytes | str, source: str = "<memory>") -> Pokemon:
    """
    Decode a serialized record with snake_case keys.

    Args:
        data: JSON document
        source: Where the document came from, for error messages

    Returns:
        The decoded record

    Raises:
        DecodeError: If the document is not a valid record
    """
    try:
        payload = json.loads(data)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object in {source}, got {type(payload).__name__}"
        )

    try:
        return Pokemon.model_validate(convert_keys(payload, convert_from_snake_case))
    except ValidationError as e:
        raise DecodeError(f"Record in {source} does not match the expected shape: {e}") from e


def encode_record(record: Pokemon) -> bytes:
    """Serialize a record with snake_case keys, omitting absent optional fields."""
    payload = record.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(
        convert_keys(payload, convert_to_snake_case),
        ensure_ascii=False,
        indent=2,
    ).encode("utf-8")


def read_resource(path: Path) -> bytes:
    """
    Read a bundled resource.

    Raises:
        DecodeError: If the file is missing or unreadable
    """
    if not path.is_file():
        raise DecodeError(f"Bundled resource not found: {path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise DecodeError(f"Failed to read bundled resource {path}: {e}") from e


def preview_record(
    resource_name: str = DEFAULT_RESOURCE_NAME,
    resources_dir: Optional[Path] = None,
) -> Pokemon:
    """Decode the bundled record without touching any store."""
    path = (resources_dir or RESOURCES_DIR) / resource_name
    return decode_record(read_resource(path), source=str(path))


class RecordLoader:
    """
    Loads the bundled record into a store.

    Usage:
        loader = RecordLoader(make_in_memory_store())
        pokemon = loader.load()

    Calling `load()` again is safe: the store deduplicates equal records.
    """

    def __init__(
        self,
        store: RecordStore,
        resource_name: str = DEFAULT_RESOURCE_NAME,
        resources_dir: Optional[Path] = None,
    ):
        """
        Initialize RecordLoader.

        Args:
            store: Store the decoded record is inserted into
            resource_name: File name of the bundled record
            resources_dir: Directory holding bundled data
        """
        self._store = store
        self.resource_name = resource_name
        self.resources_dir = resources_dir or RESOURCES_DIR

    @property
    def resource_path(self) -> Path:
        return self.resources_dir / self.resource_name

    def load(self) -> Pokemon:
        """
        Decode the bundled record and insert it into the store.

        Returns:
            The decoded record

        Raises:
            DecodeError: If the resource is missing or malformed
        """
        path = self.resource_path
        logger.debug(f"Loading record from {path}")

        try:
            record = decode_record(read_resource(path), source=str(path))
        except DecodeError as e:
            logger.error(f"Failed to load bundled record: {e}")
            raise

        stored = self._store.insert(record)
        logger.info(f"Loaded record '{record.name}' ({stored.record_id})")
        return record
