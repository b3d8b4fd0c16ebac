"""Tests for the track catalog snapshot."""

from music_tab.domain.tracks import TrackCatalog, TrackEntry


def _entry(label: str, order: int) -> TrackEntry:
    return TrackEntry(label=label, status_color=0, order=order, height=15)


class TestTrackCatalog:
    def test_starts_invalid_and_empty(self) -> None:
        catalog = TrackCatalog()
        assert not catalog.valid
        assert catalog.entries == ()

    def test_sorts_by_vertical_position(self) -> None:
        catalog = TrackCatalog()
        assert catalog.ensure_loaded([_entry("c", 30), _entry("a", 0), _entry("b", 15)])
        assert [e.label for e in catalog.entries] == ["a", "b", "c"]

    def test_sort_is_stable_for_equal_positions(self) -> None:
        catalog = TrackCatalog()
        catalog.ensure_loaded([_entry("first", 5), _entry("second", 5), _entry("top", 0)])
        assert [e.label for e in catalog.entries] == ["top", "first", "second"]

    def test_does_not_touch_raw_source(self) -> None:
        raw = [_entry("b", 15), _entry("a", 0)]
        TrackCatalog().ensure_loaded(raw)
        assert [e.label for e in raw] == ["b", "a"]

    def test_no_op_while_valid(self) -> None:
        catalog = TrackCatalog()
        catalog.ensure_loaded([_entry("a", 0)])
        catalog.ensure_loaded([_entry("x", 0), _entry("y", 15)])
        assert [e.label for e in catalog.entries] == ["a"]

    def test_absent_source_stays_pending(self) -> None:
        catalog = TrackCatalog()
        assert not catalog.ensure_loaded(None)
        assert not catalog.valid

    def test_invalidate_clears_and_allows_reload(self) -> None:
        catalog = TrackCatalog()
        catalog.ensure_loaded([_entry("a", 0)])
        catalog.invalidate()
        assert not catalog.valid
        assert len(catalog) == 0

        catalog.ensure_loaded([_entry("b", 0)])
        assert [e.label for e in catalog.entries] == ["b"]
