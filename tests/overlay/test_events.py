"""Tests for event routing."""

import pytest

from music_tab.domain.audio import SoundSource
from music_tab.overlay import (
    AreaSoundPlayed,
    EventDispatcher,
    LoginScreenEntered,
    QueryChanged,
    SoundPlayed,
)


class TestEventDispatcher:
    def test_routes_by_event_type(self) -> None:
        dispatcher = EventDispatcher()
        queries = []
        logouts = []
        dispatcher.register(QueryChanged, lambda e: queries.append(e.text))
        dispatcher.register(LoginScreenEntered, logouts.append)

        dispatcher.post(QueryChanged("harm"))
        assert queries == ["harm"]
        assert logouts == []

    def test_unhandled_event_is_ignored(self) -> None:
        event = SoundPlayed(sound_id=1)
        assert EventDispatcher().post(event) is event
        assert not event.consumed

    def test_register_and_unregister_table(self) -> None:
        dispatcher = EventDispatcher()
        seen = []

        def handler(event: QueryChanged) -> None:
            seen.append(event.text)

        table = {QueryChanged: handler}
        dispatcher.register_all(table)
        assert dispatcher.has_handlers(QueryChanged)
        dispatcher.unregister_all(table)
        assert not dispatcher.has_handlers(QueryChanged)

        dispatcher.post(QueryChanged("x"))
        assert seen == []

    def test_handler_can_consume(self) -> None:
        dispatcher = EventDispatcher()
        dispatcher.register(AreaSoundPlayed, lambda e: e.consume())
        event = dispatcher.post(AreaSoundPlayed(source=SoundSource.NPC, sound_id=1))
        assert event.consumed

    def test_handler_errors_propagate(self) -> None:
        dispatcher = EventDispatcher()

        def broken(event: QueryChanged) -> None:
            raise ValueError("bad")

        dispatcher.register(QueryChanged, broken)
        with pytest.raises(ValueError):
            dispatcher.post(QueryChanged("x"))
