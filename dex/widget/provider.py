"""
Widget host adapter.

The host asks for entries through callbacks: a placeholder right away, a
snapshot for its gallery, and timelines on its own refresh schedule. This
module is the only place that callback convention exists; underneath it the
timeline generator is plain synchronous code run to completion before the
host is called back.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import BaseModel, Field

from dex.config import TimelineConfiguration
from dex.timeline.generator import TimelineGenerator
from dex.timeline.models import SnapshotEntry, Timeline
from dex.widget.layout import RenderDescription, SizeClass, layout


class WidgetConfiguration(BaseModel):
    """Static description the host shows in its widget gallery."""

    kind: str = Field(default="DexWidget", description="Stable widget identifier")
    display_name: str = Field(default="Pokemon", description="Gallery title")
    description: str = Field(default="See a random Pokemon", description="Gallery subtitle")
    supported_sizes: tuple[SizeClass, ...] = Field(
        default=(SizeClass.SMALL, SizeClass.MEDIUM, SizeClass.LARGE),
        description="Size classes offered to the user"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class HostContext(BaseModel):
    """What the host tells us about the widget it is asking for."""

    size_class: SizeClass = Field(default=SizeClass.SMALL, description="Widget family")
    is_preview: bool = Field(default=False, description="Whether this is a gallery preview")

    model_config = {"frozen": True, "extra": "forbid"}


SnapshotCompletion = Callable[[SnapshotEntry], None]
TimelineCompletion = Callable[[Timeline], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimelineProvider:
    """
    Answers the host's timeline-pull protocol.

    If generation raises, the exception propagates and the completion is not
    called, so the host keeps showing what it already has.
    """

    def __init__(
        self,
        generator: TimelineGenerator,
        configuration: Optional[TimelineConfiguration] = None,
        clock: Callable[[], datetime] = _utcnow,
        widget: Optional[WidgetConfiguration] = None,
    ):
        """
        Initialize a provider.

        Args:
            generator: Produces the timelines
            configuration: Entry count and spacing (defaults: 5 entries, 1 hour)
            clock: Source of "now"
            widget: Gallery metadata
        """
        self._generator = generator
        self._configuration = configuration or TimelineConfiguration()
        self._clock = clock
        self.widget = widget or WidgetConfiguration()

    def placeholder(self, context: HostContext) -> SnapshotEntry:
        """An entry available instantly, before anything is loaded."""
        return self._generator.placeholder(self._clock())

    def get_snapshot(self, context: HostContext, completion: SnapshotCompletion) -> None:
        """Deliver a single entry for transient displays such as the gallery."""
        completion(self.placeholder(context))

    def get_timeline(self, context: HostContext, completion: TimelineCompletion) -> None:
        """Deliver a freshly generated timeline starting now."""
        timeline = self._generator.generate(
            now=self._clock(),
            count=self._configuration.entry_count,
            interval=self._configuration.interval,
        )
        completion(timeline)

    def render(self, context: HostContext, entry: SnapshotEntry) -> RenderDescription:
        """Describe how the host should draw an entry for its widget family."""
        return layout(context.size_class, entry)
