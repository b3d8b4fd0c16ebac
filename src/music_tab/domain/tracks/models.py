"""
Data models for the music track list.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Sprite ids used for the filter button icon
SPRITE_MINIMAP_ORB_HITPOINTS = 1060
SPRITE_MINIMAP_ORB_HITPOINTS_POISON = 1061
SPRITE_MINIMAP_ORB_PRAYER = 1063
SPRITE_GE_SEARCH = 1113

# Offset of the first row, and padding below the last one
LIST_TOP_MARGIN = 3
LIST_BOTTOM_MARGIN = 3


class TrackStatus(Enum):
    """Unlock status filter. Declaration order is the toggle order."""

    NOT_FOUND = (0xFF0000, "Locked", SPRITE_MINIMAP_ORB_HITPOINTS)
    FOUND = (0x0DC10D, "Unlocked", SPRITE_MINIMAP_ORB_HITPOINTS_POISON)
    ALL = (0, "All", SPRITE_MINIMAP_ORB_PRAYER)

    def __init__(self, color: int, display_name: str, sprite_id: int) -> None:
        self.color = color
        self.display_name = display_name
        self.sprite_id = sprite_id


@dataclass(frozen=True)
class TrackEntry:
    """One row of the music track list.

    ``order`` is the row's original vertical position and only serves as the
    stable sort key. ``handle`` is whatever the host needs to find the row
    again and takes no part in equality.
    """

    label: str
    status_color: int
    order: int
    height: int
    handle: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ScrollMetrics:
    """Scroll position of the list before a recompute."""

    offset: int = 0
    scrollable_height: int = 0


@dataclass(frozen=True)
class TrackPlacement:
    """A visible entry and the y offset it was laid out at."""

    entry: TrackEntry
    y_offset: int


@dataclass(frozen=True)
class VisibleLayout:
    """Result of one filter recompute. Derived, never stored."""

    placements: tuple[TrackPlacement, ...]
    hidden: tuple[TrackEntry, ...]
    total_content_height: int
    new_scroll_offset: int

    @property
    def visible_entries(self) -> tuple[TrackEntry, ...]:
        return tuple(p.entry for p in self.placements)
