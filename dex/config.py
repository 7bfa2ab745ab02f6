"""
Configuration for Dex.

Configuration is explicit: models are built by the caller and passed to
constructors. Nothing here reads the environment.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from dex.timeline.models import ContentMode


RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
DEFAULT_RESOURCE_NAME = "samplepokemon.json"


class StoreConfiguration(BaseModel):
    """
    How the record store is backed.

    The default keeps everything in memory; data is lost when the process
    exits. Set `stored_in_memory_only=False` and a `path` for SQLite.
    """

    stored_in_memory_only: bool = Field(default=True, description="Keep records in memory only")
    path: Optional[Path] = Field(default=None, description="SQLite file for durable stores")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_path(self) -> StoreConfiguration:
        """Durable stores need somewhere to live."""
        if not self.stored_in_memory_only and self.path is None:
            raise ValueError("path is required when stored_in_memory_only is False")
        return self


class TimelineConfiguration(BaseModel):
    """Shape of the timelines handed to the widget host."""

    entry_count: int = Field(default=5, ge=1, description="Entries per timeline")
    interval: timedelta = Field(default=timedelta(hours=1), description="Spacing between entries")
    content_mode: ContentMode = Field(default=ContentMode.REPEAT, description="Entry content policy")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: timedelta) -> timedelta:
        """Ensure the interval is positive."""
        if v <= timedelta(0):
            raise ValueError("interval must be positive")
        return v


class DexConfig(BaseModel):
    """Top-level application configuration."""

    resource_name: str = Field(default=DEFAULT_RESOURCE_NAME, description="Bundled record file name")
    resources_dir: Path = Field(default=RESOURCES_DIR, description="Directory holding bundled data")
    store: StoreConfiguration = Field(default_factory=StoreConfiguration)
    timeline: TimelineConfiguration = Field(default_factory=TimelineConfiguration)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def resource_path(self) -> Path:
        """Full path of the bundled record."""
        return self.resources_dir / self.resource_name
