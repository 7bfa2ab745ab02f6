"""Built-in entries shown before any record has been loaded."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from dex.timeline.models import SnapshotEntry


def _now() -> datetime:
    return datetime.now(timezone.utc)


def placeholder(now: Optional[datetime] = None) -> SnapshotEntry:
    """The default placeholder: bulbasaur. Immediate, no I/O."""
    return SnapshotEntry(
        timestamp=now or _now(),
        name="bulbasaur",
        types=("grass", "poison"),
        image_reference="bulbasaur.png",
    )


def alternate_placeholder(now: Optional[datetime] = None) -> SnapshotEntry:
    """A second built-in entry (mew) for previews that cycle content."""
    return SnapshotEntry(
        timestamp=now or _now(),
        name="mew",
        types=("psychic",),
        image_reference="mew.png",
    )
