"""
Host events and the handler table that routes them.

The host posts events; the plugin registers one handler per event type it
cares about. Events nobody registered for are dropped.
"""

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from loguru import logger

from music_tab.domain.audio import SoundSource

E = TypeVar("E")
Handler = Callable[[Any], None]


class Button(Enum):
    SEARCH = "search"
    FILTER = "filter"


@dataclass(frozen=True)
class LoginScreenEntered:
    """Client went back to the login screen (logout)."""


@dataclass(frozen=True)
class TrackListReloaded:
    """Music tab widgets were (re)built by the host."""


@dataclass(frozen=True)
class TabChanged:
    tab: int


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class ButtonActivated:
    button: Button


@dataclass(frozen=True)
class QueryChanged:
    text: str


@dataclass(frozen=True)
class InputClosed:
    pass


@dataclass
class AreaSoundPlayed:
    """Positional sound about to play. Consume to suppress it."""

    source: SoundSource
    sound_id: int
    consumed: bool = False

    def consume(self) -> None:
        self.consumed = True


@dataclass
class SoundPlayed:
    """Non-positional sound about to play. Consume to suppress it."""

    sound_id: int
    consumed: bool = False

    def consume(self) -> None:
        self.consumed = True


class EventDispatcher:
    """Explicit event type -> handlers table."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler]] = defaultdict(list)

    def register(self, event_type: type, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unregister(self, event_type: type, handler: Handler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def register_all(self, table: Mapping[type, Handler]) -> None:
        for event_type, handler in table.items():
            self.register(event_type, handler)

    def unregister_all(self, table: Mapping[type, Handler]) -> None:
        for event_type, handler in table.items():
            self.unregister(event_type, handler)

    def has_handlers(self, event_type: type) -> bool:
        return bool(self._handlers.get(event_type))

    def post(self, event: E) -> E:
        """Deliver ``event`` to every handler registered for its type.

        Handler exceptions propagate to the caller.

        Returns:
            The same event, so callers can inspect ``consumed``
        """
        handlers = self._handlers.get(type(event))
        if not handlers:
            logger.trace(f"No handler for {type(event).__name__}")
            return event
        for handler in list(handlers):
            handler(event)
        return event
