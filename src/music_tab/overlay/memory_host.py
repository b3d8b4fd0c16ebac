"""
In-memory stand-in for the game client.

Keeps the music list, header buttons and text input as plain Python state so
the overlay can be driven from the CLI and tests.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from music_tab.domain.tracks import ScrollMetrics, TrackEntry, VisibleLayout

from .events import (
    Button,
    ButtonActivated,
    EventDispatcher,
    InputClosed,
    LoginScreenEntered,
    QueryChanged,
    TabChanged,
    TrackListReloaded,
)
from .host import ButtonSpec
from .scheduler import DeferredTasks

MUSIC_TAB = 13


@dataclass
class HostRow:
    """A track row widget."""

    label: str
    color: int
    y: int
    height: int
    hidden: bool = False


@dataclass
class HostInput:
    prompt: str
    value: str = ""


@dataclass
class InMemoryHost:
    """Client state plus helpers that simulate user input."""

    rows: list[HostRow] = field(default_factory=list)
    dispatcher: EventDispatcher = field(default_factory=EventDispatcher)
    tasks: DeferredTasks = field(default_factory=DeferredTasks)
    header_loaded: bool = True
    list_loaded: bool = True
    tab: int = MUSIC_TAB
    scroll_y: int = 0
    scroll_height: int = 0
    buttons: dict[Button, ButtonSpec] = field(default_factory=dict)
    text_input: Optional[HostInput] = None
    played_sounds: list[int] = field(default_factory=list)
    layouts: list[VisibleLayout] = field(default_factory=list)
    _initial_rows: list[tuple[int, bool]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._initial_rows = [(row.y, row.hidden) for row in self.rows]

    @classmethod
    def from_tracks(cls, tracks: Iterable[dict[str, Any]], **kwargs: Any) -> "InMemoryHost":
        """Build a host from ``{label, color, y, height}`` dicts."""
        rows = [
            HostRow(
                label=str(t["label"]),
                color=int(t.get("color", 0)),
                y=int(t["y"]),
                height=int(t["height"]),
            )
            for t in tracks
        ]
        return cls(rows=rows, **kwargs)

    # MusicHost

    def has_music_header(self) -> bool:
        return self.header_loaded

    def get_track_entries(self) -> Optional[Sequence[TrackEntry]]:
        if not self.list_loaded:
            return None
        return [
            TrackEntry(
                label=row.label,
                status_color=row.color,
                order=row.y,
                height=row.height,
                handle=index,
            )
            for index, row in enumerate(self.rows)
        ]

    def get_scroll_metrics(self) -> Optional[ScrollMetrics]:
        if not self.list_loaded:
            return None
        return ScrollMetrics(offset=self.scroll_y, scrollable_height=self.scroll_height)

    def apply_layout(self, layout: VisibleLayout) -> None:
        for entry in layout.hidden:
            self.rows[entry.handle].hidden = True
        for placement in layout.placements:
            row = self.rows[placement.entry.handle]
            row.hidden = False
            row.y = placement.y_offset
        self.scroll_height = layout.total_content_height
        self.scroll_y = layout.new_scroll_offset
        self.layouts.append(layout)

    def add_buttons(self, search: ButtonSpec, filter_: ButtonSpec) -> None:
        self.buttons[Button.SEARCH] = search
        self.buttons[Button.FILTER] = filter_

    def update_search_button(self, spec: ButtonSpec) -> None:
        self.buttons[Button.SEARCH] = spec

    def update_filter_button(self, spec: ButtonSpec) -> None:
        self.buttons[Button.FILTER] = spec

    def clear_buttons(self) -> None:
        self.buttons.clear()

    def is_on_music_tab(self) -> bool:
        return self.tab == MUSIC_TAB

    def open_text_input(self, prompt: str) -> None:
        self.text_input = HostInput(prompt=prompt)

    def close_text_input(self) -> None:
        if self.text_input is None:
            return
        self.text_input = None
        self.dispatcher.post(InputClosed())

    def is_text_input_open(self) -> bool:
        return self.text_input is not None

    def get_text_input_value(self) -> str:
        return self.text_input.value if self.text_input else ""

    def play_sound_effect(self, sound_id: int) -> None:
        self.played_sounds.append(sound_id)

    # Simulated user and client activity

    def click(self, button: Button) -> None:
        self.dispatcher.post(ButtonActivated(button))

    def type_text(self, text: str) -> None:
        if self.text_input is None:
            return
        self.text_input.value = text
        self.dispatcher.post(QueryChanged(text))

    def dismiss_input(self) -> None:
        self.close_text_input()

    def switch_tab(self, tab: int) -> None:
        self.tab = tab
        self.dispatcher.post(TabChanged(tab))

    def logout(self) -> None:
        self.dispatcher.post(LoginScreenEntered())

    def reload_track_list(self) -> None:
        for row, (y, hidden) in zip(self.rows, self._initial_rows):
            row.y = y
            row.hidden = hidden
        self.scroll_y = 0
        self.scroll_height = 0
        self.dispatcher.post(TrackListReloaded())

    def tick(self) -> int:
        return self.tasks.run_pending()

    def visible_labels(self) -> list[str]:
        shown = [row for row in self.rows if not row.hidden]
        return [row.label for row in sorted(shown, key=lambda r: r.y)]
