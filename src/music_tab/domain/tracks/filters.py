"""Filter state for the track list and the status toggle cycle."""

from dataclasses import dataclass, replace

from .models import TrackStatus

# Toggle order, wraps around at the end
STATUS_CYCLE: tuple[TrackStatus, ...] = (
    TrackStatus.NOT_FOUND,
    TrackStatus.FOUND,
    TrackStatus.ALL,
)


@dataclass(frozen=True)
class FilterState:
    """Current status filter and search text."""

    status: TrackStatus = TrackStatus.ALL
    query: str = ""

    def with_query(self, query: str) -> "FilterState":
        return replace(self, query=query.strip())

    def with_status(self, status: TrackStatus) -> "FilterState":
        return replace(self, status=status)


def advance_status(current: TrackStatus) -> TrackStatus:
    """Return the status after ``current``: ALL -> NOT_FOUND -> FOUND -> ALL."""
    index = STATUS_CYCLE.index(current)
    return STATUS_CYCLE[(index + 1) % len(STATUS_CYCLE)]


def matches(label: str, status_color: int, needle: str, status: TrackStatus) -> bool:
    """Check a row against a lowercased needle and a status filter."""
    if needle not in label.lower():
        return False
    return status is TrackStatus.ALL or status_color == status.color
