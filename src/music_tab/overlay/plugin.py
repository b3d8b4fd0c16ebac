"""
Music tab overlay: search, status filter and sound muting.

Wires host events to the track filter engine and the mute policy. All work
runs on the client thread; search text changes are applied on the next tick.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from music_tab.domain.audio import AudioEventClassifier, Decision, MuteConfigProvider
from music_tab.domain.audio.sound_ids import UI_BOOP
from music_tab.domain.tracks import (
    FilterState,
    TrackCatalog,
    VisibleLayout,
    advance_status,
    recompute,
)
from music_tab.domain.tracks.models import SPRITE_GE_SEARCH

from .events import (
    AreaSoundPlayed,
    Button,
    ButtonActivated,
    EventDispatcher,
    FocusLost,
    Handler,
    InputClosed,
    LoginScreenEntered,
    QueryChanged,
    SoundPlayed,
    TabChanged,
    TrackListReloaded,
)
from .host import SEARCH_PROMPT, ButtonSpec, MusicHost
from .scheduler import DeferredTasks

FILTER_SLOT = "filter"

SEARCH_BUTTON_OPEN = ButtonSpec(name="Search", action="Open", sprite_id=SPRITE_GE_SEARCH)
SEARCH_BUTTON_CLOSE = ButtonSpec(name="Search", action="Close", sprite_id=SPRITE_GE_SEARCH)


class SearchSession(Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass
class SessionState:
    """Per-login state. Reset on logout and when the track list reloads."""

    catalog: TrackCatalog = field(default_factory=TrackCatalog)
    filter: FilterState = field(default_factory=FilterState)
    search: SearchSession = SearchSession.CLOSED

    def reset(self) -> None:
        self.catalog.invalidate()
        self.filter = FilterState()


def filter_button_spec(state: FilterState) -> ButtonSpec:
    return ButtonSpec(
        name=state.status.display_name,
        action="Toggle",
        sprite_id=state.status.sprite_id,
    )


class MusicPlugin:
    """Adds search and filter to the music list, and mutes sound categories."""

    def __init__(
        self,
        host: MusicHost,
        tasks: DeferredTasks,
        config_provider: MuteConfigProvider,
    ) -> None:
        self._host = host
        self._tasks = tasks
        self._classifier = AudioEventClassifier(config_provider)
        self._dispatcher: Optional[EventDispatcher] = None
        self._search_action: Callable[[], None] = self.open_search
        self.state = SessionState()

    # Lifecycle

    def event_handlers(self) -> dict[type, Handler]:
        return {
            LoginScreenEntered: self.on_login_screen_entered,
            TrackListReloaded: self.on_track_list_reloaded,
            TabChanged: self.on_tab_changed,
            FocusLost: self.on_focus_lost,
            ButtonActivated: self.on_button_activated,
            QueryChanged: self.on_query_changed,
            InputClosed: self.on_input_closed,
            AreaSoundPlayed: self.on_area_sound_played,
            SoundPlayed: self.on_sound_played,
        }

    def start_up(self, dispatcher: EventDispatcher) -> None:
        self._dispatcher = dispatcher
        dispatcher.register_all(self.event_handlers())
        self._tasks.invoke(self._add_buttons)
        logger.info("Music tab overlay started")

    def shut_down(self) -> None:
        if self._dispatcher is not None:
            self._dispatcher.unregister_all(self.event_handlers())
            self._dispatcher = None
        if self._host.has_music_header():
            self._host.clear_buttons()
        self.state.catalog.invalidate()
        logger.info("Music tab overlay stopped")

    def _add_buttons(self) -> None:
        if not self._host.has_music_header():
            logger.debug("Music header not loaded, skipping buttons")
            return
        self._host.clear_buttons()
        self._host.add_buttons(SEARCH_BUTTON_OPEN, filter_button_spec(self.state.filter))
        self._search_action = self.open_search

    # Host events

    def on_login_screen_entered(self, event: LoginScreenEntered) -> None:
        self.state.reset()
        logger.debug("Logged out, track filter reset")

    def on_track_list_reloaded(self, event: TrackListReloaded) -> None:
        # Rebuilt buttons start in the "Open" state, so drop any open search
        if self.is_search_open():
            self._host.close_text_input()
        self.state.reset()
        self._add_buttons()

    def on_tab_changed(self, event: TabChanged) -> None:
        self._close_search_off_tab()

    def on_focus_lost(self, event: FocusLost) -> None:
        self._close_search_off_tab()

    def on_button_activated(self, event: ButtonActivated) -> None:
        if event.button is Button.SEARCH:
            self._search_action()
        elif event.button is Button.FILTER:
            self.toggle_status()

    def on_query_changed(self, event: QueryChanged) -> None:
        if self.state.search is not SearchSession.OPEN:
            return
        text = event.text
        self._tasks.invoke_later(lambda: self.update_filter(text), slot=FILTER_SLOT)

    def on_input_closed(self, event: InputClosed) -> None:
        if self.state.search is not SearchSession.OPEN:
            return
        self.state.search = SearchSession.CLOSED
        self._tasks.invoke_later(lambda: self.update_filter(""), slot=FILTER_SLOT)
        self._search_action = self.open_search
        self._host.update_search_button(SEARCH_BUTTON_OPEN)

    def on_area_sound_played(self, event: AreaSoundPlayed) -> None:
        if self._classifier.classify_area(event.source, event.sound_id) is Decision.SUPPRESS:
            event.consume()

    def on_sound_played(self, event: SoundPlayed) -> None:
        if self._classifier.classify_global(event.sound_id) is Decision.SUPPRESS:
            event.consume()

    # Search and filter

    def is_search_open(self) -> bool:
        return (
            self.state.search is SearchSession.OPEN
            and self._host.is_text_input_open()
        )

    def open_search(self) -> None:
        self.update_filter("")
        self._host.play_sound_effect(UI_BOOP)
        self._search_action = self.close_search
        self._host.update_search_button(SEARCH_BUTTON_CLOSE)
        self.state.search = SearchSession.OPEN
        self._host.open_text_input(SEARCH_PROMPT)

    def close_search(self) -> None:
        self.update_filter("")
        self._host.close_text_input()
        self._host.play_sound_effect(UI_BOOP)

    def toggle_status(self) -> None:
        self.state.filter = self.state.filter.with_status(
            advance_status(self.state.filter.status)
        )
        self._host.update_filter_button(filter_button_spec(self.state.filter))
        self.update_filter(self._current_input())
        self._host.play_sound_effect(UI_BOOP)

    def update_filter(self, query: str) -> Optional[VisibleLayout]:
        """Set the search text and re-filter the list.

        Returns:
            The applied layout, or None if the music widgets are not loaded
        """
        self.state.filter = self.state.filter.with_query(query)
        return self.refresh()

    def refresh(self) -> Optional[VisibleLayout]:
        """Recompute and apply the layout for the current filter state."""
        if not self._host.has_music_header():
            logger.debug("Music header not loaded, filter pending")
            return None
        scroll = self._host.get_scroll_metrics()
        if scroll is None:
            logger.debug("Track list not loaded, filter pending")
            return None

        raw_entries = None if self.state.catalog.valid else self._host.get_track_entries()
        layout = recompute(self.state.catalog, self.state.filter, scroll, raw_entries)
        if layout is not None:
            self._host.apply_layout(layout)
        return layout

    def _current_input(self) -> str:
        return self._host.get_text_input_value() if self.is_search_open() else ""

    def _close_search_off_tab(self) -> None:
        if self.is_search_open() and not self._host.is_on_music_tab():
            self._host.close_text_input()
