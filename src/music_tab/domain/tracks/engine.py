"""Pure helper functions for filtering and laying out the track list."""

from typing import Iterable, Optional

from loguru import logger

from .catalog import TrackCatalog
from .filters import FilterState, matches
from .models import (
    LIST_BOTTOM_MARGIN,
    LIST_TOP_MARGIN,
    ScrollMetrics,
    TrackEntry,
    TrackPlacement,
    VisibleLayout,
)


def select_entries(
    entries: Iterable[TrackEntry], filter_state: FilterState
) -> list[TrackEntry]:
    """Select entries matching the search text and status filter.

    Matching is case-insensitive substring containment. The result keeps the
    order of ``entries``.

    Args:
        entries: Catalog entries in display order
        filter_state: Current status filter and query

    Returns:
        Matching entries, in input order
    """
    needle = filter_state.query.lower()
    return [
        entry
        for entry in entries
        if matches(entry.label, entry.status_color, needle, filter_state.status)
    ]


def layout_entries(
    entries: Iterable[TrackEntry],
) -> tuple[tuple[TrackPlacement, ...], int]:
    """Stack entries top to bottom between the list margins.

    Args:
        entries: Entries to show, in display order

    Returns:
        Tuple of (placements, total content height)

    Rows of heights 10, 20 and 15 land at offsets 3, 13 and 33, for a total
    height of 51.
    """
    y = LIST_TOP_MARGIN
    placements = []
    for entry in entries:
        placements.append(TrackPlacement(entry=entry, y_offset=y))
        y += entry.height
    return tuple(placements), y + LIST_BOTTOM_MARGIN


def scale_scroll_offset(previous: ScrollMetrics, total_content_height: int) -> int:
    """Keep the relative scroll position when the content height changes.

    Returns 0 when the list had no scrollable height before, even if it has
    content now.

    Examples:
        >>> scale_scroll_offset(ScrollMetrics(offset=40, scrollable_height=100), 200)
        80
        >>> scale_scroll_offset(ScrollMetrics(offset=40, scrollable_height=0), 200)
        0
    """
    if previous.scrollable_height > 0:
        return previous.offset * total_content_height // previous.scrollable_height
    return 0


def recompute(
    catalog: TrackCatalog,
    filter_state: FilterState,
    previous_scroll: ScrollMetrics,
    raw_entries: Optional[Iterable[TrackEntry]] = None,
) -> Optional[VisibleLayout]:
    """Recompute which entries are visible and where they go.

    Every entry is assigned again on each call, visible at an offset or
    hidden, so no state from an earlier recompute survives.

    Args:
        catalog: Track snapshot, loaded from ``raw_entries`` if not valid
        filter_state: Current status filter and query
        previous_scroll: Scroll position before this recompute
        raw_entries: Host rows, only needed while the catalog is invalid

    Returns:
        The new layout, or None if the track list is not loaded yet
    """
    if not catalog.ensure_loaded(raw_entries):
        return None

    selected = select_entries(catalog.entries, filter_state)
    placements, total_height = layout_entries(selected)
    shown = {id(entry) for entry in selected}
    hidden = tuple(entry for entry in catalog.entries if id(entry) not in shown)
    new_offset = scale_scroll_offset(previous_scroll, total_height)

    logger.debug(
        f"Filter {filter_state.status.display_name}/{filter_state.query!r}: "
        f"{len(placements)}/{len(catalog)} visible, height={total_height}, "
        f"scroll={new_offset}"
    )
    return VisibleLayout(
        placements=placements,
        hidden=hidden,
        total_content_height=total_height,
        new_scroll_offset=new_offset,
    )
