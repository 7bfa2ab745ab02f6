"""
Timeline layer for Dex.

Snapshot entries and the generator that batches them for pull-based widgets.
"""

from dex.timeline.models import ContentMode, ReloadPolicy, SnapshotEntry, Timeline
from dex.timeline.placeholders import placeholder, alternate_placeholder
from dex.timeline.generator import TimelineGenerator

__all__ = [
    "ContentMode",
    "ReloadPolicy",
    "SnapshotEntry",
    "Timeline",
    "placeholder",
    "alternate_placeholder",
    "TimelineGenerator",
]
