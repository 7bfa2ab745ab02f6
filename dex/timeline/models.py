"""
Timeline models for Dex.

A display surface that cannot run its own logic pulls a Timeline: a finite,
ordered batch of SnapshotEntry values, each one a denormalized copy of the
record fields the widget needs.

- SnapshotEntry: One timestamped projection of a Pokemon
- Timeline: Strictly time-ordered entries plus a reload policy
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictStr, model_validator

from dex.core.models import Pokemon


class ReloadPolicy(str, Enum):
    """When the display surface should ask for a new Timeline."""

    AT_END = "at_end"  # After the last entry's timestamp has passed


class ContentMode(str, Enum):
    """
    How entry content is chosen across one Timeline.

    REPEAT: Every entry carries the latest record.
    ROTATE: Entry i carries record i mod n, in insertion order.
    """

    REPEAT = "repeat"
    ROTATE = "rotate"


class SnapshotEntry(BaseModel):
    """
    A denormalized, timestamped projection of a Pokemon.

    Entries are values: they hold copies of the fields, not a reference
    back to the record. `types` is never empty because renderers index the
    first type unconditionally for the background colour.
    """

    timestamp: datetime = Field(..., description="When this entry becomes current")
    name: StrictStr = Field(..., min_length=1, description="Display name")
    types: tuple[StrictStr, ...] = Field(
        ...,
        min_length=1,
        description="Classification tags, primary type first"
    )
    image_reference: StrictStr = Field(..., description="Opaque handle to the sprite asset")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_record(cls, record: Pokemon, timestamp: datetime) -> SnapshotEntry:
        """Project a record onto an entry at the given instant."""
        return cls(
            timestamp=timestamp,
            name=record.name,
            types=record.types,
            image_reference=record.image_reference,
        )

    @property
    def categories(self) -> list[str]:
        """The types as a list, primary type first."""
        return list(self.types)

    def content(self) -> dict[str, Any]:
        """Everything except the timestamp, for comparing what is shown."""
        return self.model_dump(exclude={"timestamp"})


class Timeline(BaseModel):
    """
    An ordered, finite batch of entries handed to a pull-based surface.

    Timelines are never mutated after construction and are not kept
    between pulls.
    """

    entries: tuple[SnapshotEntry, ...] = Field(..., min_length=1, description="Entries in time order")
    policy: ReloadPolicy = Field(default=ReloadPolicy.AT_END, description="Reload policy")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_ordering(self) -> Timeline:
        """Ensure timestamps are strictly increasing."""
        for previous, current in zip(self.entries, self.entries[1:]):
            if current.timestamp <= previous.timestamp:
                raise ValueError(
                    f"entries must be strictly increasing in time: "
                    f"{current.timestamp.isoformat()} follows {previous.timestamp.isoformat()}"
                )
        return self

    @property
    def first(self) -> SnapshotEntry:
        """The entry current when the timeline is delivered."""
        return self.entries[0]

    @property
    def expires_at(self) -> datetime:
        """Timestamp after which the surface should reload."""
        return self.entries[-1].timestamp

    def entry_at(self, instant: datetime) -> SnapshotEntry:
        """
        Return the entry current at an instant.

        Instants before the first entry resolve to the first entry.
        """
        current = self.entries[0]
        for entry in self.entries:
            if entry.timestamp > instant:
                break
            current = entry
        return current
