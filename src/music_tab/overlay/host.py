"""Boundary between the overlay and the game client."""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from music_tab.domain.tracks import ScrollMetrics, TrackEntry, VisibleLayout

SEARCH_PROMPT = "Search music list"


@dataclass(frozen=True)
class ButtonSpec:
    """What a header button shows: hover name, menu action and icon."""

    name: str
    action: str
    sprite_id: int


class MusicHost(Protocol):
    """Calls the overlay makes into the client.

    Reads return None when the widget they need is not loaded.
    """

    def has_music_header(self) -> bool: ...

    def get_track_entries(self) -> Optional[Sequence[TrackEntry]]: ...

    def get_scroll_metrics(self) -> Optional[ScrollMetrics]: ...

    def apply_layout(self, layout: VisibleLayout) -> None: ...

    def add_buttons(self, search: ButtonSpec, filter_: ButtonSpec) -> None: ...

    def update_search_button(self, spec: ButtonSpec) -> None: ...

    def update_filter_button(self, spec: ButtonSpec) -> None: ...

    def clear_buttons(self) -> None: ...

    def is_on_music_tab(self) -> bool: ...

    def open_text_input(self, prompt: str) -> None: ...

    def close_text_input(self) -> None:
        """Close the text input. The host posts InputClosed."""
        ...

    def is_text_input_open(self) -> bool: ...

    def get_text_input_value(self) -> str: ...

    def play_sound_effect(self, sound_id: int) -> None: ...
