"""
Dex - a creature profile and the widget timelines built from it.

Two responsibilities:
- Record loading: bundled JSON -> validated, immutable Pokemon in a store
- Timeline generation: store -> time-ordered snapshots for a pull-based widget
"""
from dex.config import DexConfig, StoreConfiguration, TimelineConfiguration
from dex.core.models import Pokemon
from dex.storage.engine import RecordStore, InMemoryRecordStore, StoredRecord, StoreError
from dex.storage.sqlite import SQLiteRecordStore
from dex.storage.factory import make_in_memory_store, make_store
from dex.ingestion.loader import DecodeError, RecordLoader, decode_record, encode_record, preview_record
from dex.timeline.models import ContentMode, ReloadPolicy, SnapshotEntry, Timeline
from dex.timeline.placeholders import placeholder, alternate_placeholder
from dex.timeline.generator import TimelineGenerator
from dex.widget.layout import RenderDescription, SizeClass, layout
from dex.widget.provider import HostContext, TimelineProvider, WidgetConfiguration
from dex.interface.client import Dex, StartupError

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DexConfig",
    "StoreConfiguration",
    "TimelineConfiguration",
    # Core model
    "Pokemon",
    # Storage
    "RecordStore",
    "InMemoryRecordStore",
    "SQLiteRecordStore",
    "StoredRecord",
    "StoreError",
    "make_in_memory_store",
    "make_store",
    # Loading
    "RecordLoader",
    "DecodeError",
    "decode_record",
    "encode_record",
    "preview_record",
    # Timeline
    "SnapshotEntry",
    "Timeline",
    "ReloadPolicy",
    "ContentMode",
    "TimelineGenerator",
    "placeholder",
    "alternate_placeholder",
    # Widget
    "SizeClass",
    "RenderDescription",
    "layout",
    "HostContext",
    "TimelineProvider",
    "WidgetConfiguration",
    # Client
    "Dex",
    "StartupError",
]
