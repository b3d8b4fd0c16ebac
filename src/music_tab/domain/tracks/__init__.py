"""Music track list domain: catalog, filter state and layout engine."""

from .catalog import TrackCatalog
from .engine import layout_entries, recompute, scale_scroll_offset, select_entries
from .filters import STATUS_CYCLE, FilterState, advance_status
from .models import (
    ScrollMetrics,
    TrackEntry,
    TrackPlacement,
    TrackStatus,
    VisibleLayout,
)

__all__ = [
    "TrackCatalog",
    "layout_entries",
    "recompute",
    "scale_scroll_offset",
    "select_entries",
    "STATUS_CYCLE",
    "FilterState",
    "advance_status",
    "ScrollMetrics",
    "TrackEntry",
    "TrackPlacement",
    "TrackStatus",
    "VisibleLayout",
]
