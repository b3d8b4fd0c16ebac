"""
Cached snapshot of the track list rows.

The host list is read once after each (re)load and kept in its original
vertical order, so filtering can hide and move rows without losing where
they started.
"""

from typing import Iterable, Optional

from loguru import logger

from .models import TrackEntry


class TrackCatalog:
    """Lazily captured, ordered snapshot of track entries."""

    def __init__(self) -> None:
        self._entries: tuple[TrackEntry, ...] = ()
        self._valid = False

    @property
    def entries(self) -> tuple[TrackEntry, ...]:
        return self._entries

    @property
    def valid(self) -> bool:
        return self._valid

    def ensure_loaded(self, raw_entries: Optional[Iterable[TrackEntry]]) -> bool:
        """Capture ``raw_entries`` unless a snapshot is already held.

        Args:
            raw_entries: Rows read from the host, in any order. None means the
                list is not loaded yet.

        Returns:
            True if the catalog holds a snapshot after the call
        """
        if self._valid:
            return True
        if raw_entries is None:
            logger.debug("Track list not loaded yet, catalog stays pending")
            return False

        # sorted() is stable, rows sharing a position keep host order
        self._entries = tuple(sorted(raw_entries, key=lambda e: e.order))
        self._valid = True
        logger.debug(f"Captured {len(self._entries)} tracks")
        return True

    def invalidate(self) -> None:
        self._entries = ()
        self._valid = False

    def __len__(self) -> int:
        return len(self._entries)
