"""Tests for filter state and the status toggle cycle."""

from music_tab.domain.tracks import STATUS_CYCLE, FilterState, TrackStatus, advance_status


class TestAdvanceStatus:
    def test_cycle_from_all(self) -> None:
        status = TrackStatus.ALL
        seen = []
        for _ in range(3):
            status = advance_status(status)
            seen.append(status)
        assert seen == [TrackStatus.NOT_FOUND, TrackStatus.FOUND, TrackStatus.ALL]

    def test_every_status_returns_after_full_cycle(self) -> None:
        for start in STATUS_CYCLE:
            status = start
            for _ in range(len(STATUS_CYCLE)):
                status = advance_status(status)
            assert status is start


class TestTrackStatus:
    def test_colors_and_names(self) -> None:
        assert TrackStatus.NOT_FOUND.color == 0xFF0000
        assert TrackStatus.NOT_FOUND.display_name == "Locked"
        assert TrackStatus.FOUND.color == 0x0DC10D
        assert TrackStatus.FOUND.display_name == "Unlocked"
        assert TrackStatus.ALL.display_name == "All"


class TestFilterState:
    def test_defaults(self) -> None:
        state = FilterState()
        assert state.status is TrackStatus.ALL
        assert state.query == ""

    def test_with_query_trims(self) -> None:
        assert FilterState().with_query("  harmony ").query == "harmony"

    def test_updates_return_new_state(self) -> None:
        state = FilterState()
        updated = state.with_status(TrackStatus.FOUND)
        assert updated.status is TrackStatus.FOUND
        assert state.status is TrackStatus.ALL
