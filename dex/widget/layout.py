"""
Widget layout descriptions.

`layout()` is a pure function from a size class and an entry to a
description of what to draw. It consumes SnapshotEntry values and never
produces them; painting pixels is the host's job.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from dex.timeline.models import SnapshotEntry


class SizeClass(str, Enum):
    """Widget families the host can ask for."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"


class Arrangement(str, Enum):
    """How the sprite sits relative to the text."""

    IMAGE_ONLY = "image_only"
    IMAGE_LEADING = "image_leading"  # sprite left, name and badges right
    IMAGE_BEHIND = "image_behind"  # sprite behind name and badges


class TitleFont(str, Enum):
    TITLE = "title"
    LARGE_TITLE = "large_title"


class HorizontalAlignment(str, Enum):
    LEADING = "leading"
    TRAILING = "trailing"


class TypeBadge(BaseModel):
    """A capsule showing one type, tinted with that type's colour."""

    label: str = Field(..., description="Capitalized type name")
    color: str = Field(..., description="Named colour asset for the type")

    model_config = {"frozen": True, "extra": "forbid"}


class RenderDescription(BaseModel):
    """Everything a renderer needs to draw one entry at one size."""

    size_class: SizeClass = Field(..., description="Size the description targets")
    arrangement: Arrangement = Field(..., description="Sprite placement")
    image_reference: str = Field(..., description="Sprite to draw")
    background_color: str = Field(..., description="Named colour for the container background")

    title: Optional[str] = Field(default=None, description="Capitalized name, if shown")
    title_font: Optional[TitleFont] = Field(default=None, description="Font for the title")
    title_line_limit: Optional[int] = Field(default=None, description="Max title lines (None = no limit)")
    title_minimum_scale: Optional[float] = Field(default=None, description="Smallest allowed title shrink")

    badges: tuple[TypeBadge, ...] = Field(default=(), description="Type badges, primary first")
    badge_alignment: Optional[HorizontalAlignment] = Field(default=None, description="Badge row alignment")

    model_config = {"frozen": True, "extra": "forbid"}


def type_color(type_name: str) -> str:
    """Colour asset name for a type: the capitalized type name."""
    return type_name.capitalize()


def _badges(entry: SnapshotEntry) -> tuple[TypeBadge, ...]:
    return tuple(TypeBadge(label=t.capitalize(), color=type_color(t)) for t in entry.types)


def layout(size_class: SizeClass, entry: SnapshotEntry) -> RenderDescription:
    """
    Describe how to draw an entry for a size class.

    MEDIUM puts the sprite beside the name and badges, LARGE draws them over
    the sprite, and every other size shows the sprite alone.
    """
    background = type_color(entry.types[0])

    if size_class == SizeClass.MEDIUM:
        return RenderDescription(
            size_class=size_class,
            arrangement=Arrangement.IMAGE_LEADING,
            image_reference=entry.image_reference,
            background_color=background,
            title=entry.name.capitalize(),
            title_font=TitleFont.TITLE,
            badges=_badges(entry),
            badge_alignment=HorizontalAlignment.LEADING,
        )

    elif size_class == SizeClass.LARGE:
        return RenderDescription(
            size_class=size_class,
            arrangement=Arrangement.IMAGE_BEHIND,
            image_reference=entry.image_reference,
            background_color=background,
            title=entry.name.capitalize(),
            title_font=TitleFont.LARGE_TITLE,
            title_line_limit=1,
            title_minimum_scale=0.75,
            badges=_badges(entry),
            badge_alignment=HorizontalAlignment.TRAILING,
        )

    return RenderDescription(
        size_class=size_class,
        arrangement=Arrangement.IMAGE_ONLY,
        image_reference=entry.image_reference,
        background_color=background,
    )
