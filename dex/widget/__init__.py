"""Widget host boundary: layout descriptions and the timeline provider."""

from dex.widget.layout import RenderDescription, SizeClass, TypeBadge, layout
from dex.widget.provider import HostContext, TimelineProvider, WidgetConfiguration

__all__ = [
    "RenderDescription",
    "SizeClass",
    "TypeBadge",
    "layout",
    "HostContext",
    "TimelineProvider",
    "WidgetConfiguration",
]
