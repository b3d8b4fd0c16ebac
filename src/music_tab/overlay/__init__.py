"""Music tab overlay: host boundary, event routing and the plugin."""

from .events import (
    AreaSoundPlayed,
    Button,
    ButtonActivated,
    EventDispatcher,
    FocusLost,
    InputClosed,
    LoginScreenEntered,
    QueryChanged,
    SoundPlayed,
    TabChanged,
    TrackListReloaded,
)
from .host import ButtonSpec, MusicHost
from .memory_host import InMemoryHost
from .plugin import MusicPlugin, SearchSession, SessionState
from .scheduler import DeferredTasks

__all__ = [
    "AreaSoundPlayed",
    "Button",
    "ButtonActivated",
    "EventDispatcher",
    "FocusLost",
    "InputClosed",
    "LoginScreenEntered",
    "QueryChanged",
    "SoundPlayed",
    "TabChanged",
    "TrackListReloaded",
    "ButtonSpec",
    "MusicHost",
    "InMemoryHost",
    "MusicPlugin",
    "SearchSession",
    "SessionState",
    "DeferredTasks",
]
