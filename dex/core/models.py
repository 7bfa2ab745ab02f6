"""
Core domain model for Dex.

This module defines the single record the application displays:

- Pokemon: An immutable creature profile decoded from bundled data

Design Philosophy:
    The record is read-only once loaded. Everything downstream (the store,
    the timeline, the widget layout) reads it and copies what it needs,
    never mutating it in place.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Optional

import ulid
from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel


def generate_id() -> str:
    """Generate a unique, sortable ID using ULID."""
    return str(ulid.new())


def compute_content_hash(data: dict[str, Any]) -> str:
    """
    Compute a content-addressable hash for data.

    This enables deduplication when the same record is inserted twice.
    """
    serialized = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(serialized.encode()).hexdigest()[:16]


class Pokemon(BaseModel):
    """
    A creature profile.

    Only `name`, `types` and `image_reference` are required; the remaining
    profile fields are carried when the source provides them.

    Field names use snake_case in Python and camelCase aliases in memory
    payloads, so a decoded mapping must have had its keys converted first
    (see `dex.ingestion.keys`).

    Examples:
        - Pokemon(name="bulbasaur", types=["grass", "poison"], image_reference="bulbasaur.png")
        - Pokemon(name="mew", types=["psychic"], image_reference="mew.png", hp=100)
    """

    name: StrictStr = Field(..., description="Display name, unique within one store")
    types: tuple[StrictStr, ...] = Field(
        ...,
        min_length=1,
        description="Classification tags, primary type first"
    )
    image_reference: StrictStr = Field(..., description="Opaque handle to the sprite asset")

    id: Optional[StrictInt] = Field(default=None, ge=1, description="National dex number")
    hp: Optional[StrictInt] = Field(default=None, ge=0, description="Base HP")
    attack: Optional[StrictInt] = Field(default=None, ge=0, description="Base attack")
    defense: Optional[StrictInt] = Field(default=None, ge=0, description="Base defense")
    special_attack: Optional[StrictInt] = Field(default=None, ge=0, description="Base special attack")
    special_defense: Optional[StrictInt] = Field(default=None, ge=0, description="Base special defense")
    speed: Optional[StrictInt] = Field(default=None, ge=0, description="Base speed")
    shiny_reference: Optional[StrictStr] = Field(
        default=None,
        description="Opaque handle to the shiny sprite asset"
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not empty."""
        if not v or not v.strip():
            raise ValueError("name cannot be empty")
        return v.strip()

    @field_validator("types")
    @classmethod
    def validate_types(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure every type is a non-empty tag."""
        cleaned = tuple(t.strip() for t in v)
        if any(not t for t in cleaned):
            raise ValueError("types cannot contain empty values")
        return cleaned

    @property
    def categories(self) -> list[str]:
        """The types as a list, primary type first."""
        return list(self.types)

    @property
    def primary_type(self) -> str:
        """The first type, used for accent colours."""
        return self.types[0]

    @property
    def content_hash(self) -> str:
        """Content-addressable hash over every field."""
        return compute_content_hash(self.model_dump(mode="json"))
