"""
Sound effect mute policy.

Decides per played sound whether to suppress it, based on who made the sound
and which categories are muted. Unknown source kinds are always allowed, so a
bad event never mutes audio the user did not ask to mute.
"""

from enum import Enum
from typing import Callable

from loguru import logger

from music_tab.core.config import MuteConfig

from .sound_ids import PRAYER_SOUNDS, SOURCELESS_PLAYER_SOUNDS

MuteConfigProvider = Callable[[], MuteConfig]


class SoundSource(Enum):
    """Actor an area sound is attributed to."""

    LOCAL_PLAYER = "local"
    OTHER_PLAYER = "other"
    NPC = "npc"
    NONE = "none"


class Decision(Enum):
    ALLOW = "allow"
    SUPPRESS = "suppress"


def classify_area_sound(
    source: SoundSource, sound_id: int, config: MuteConfig
) -> Decision:
    """Decide whether a positional sound should be suppressed.

    Rules are checked in order and the first match wins:
    own sounds, other players (including sourceless player sounds such as
    teleports), NPCs, then the environment.

    Args:
        source: Actor kind the sound is attributed to
        sound_id: Sound effect id
        config: Mute flags to apply

    Returns:
        Decision.SUPPRESS if the sound falls in a muted category
    """
    if not isinstance(source, SoundSource):
        logger.debug(f"Unknown sound source {source!r} for sound {sound_id}, allowing")
        return Decision.ALLOW

    sourceless_player = (
        source is SoundSource.NONE and sound_id in SOURCELESS_PLAYER_SOUNDS
    )

    if source is SoundSource.LOCAL_PLAYER and config.mute_own_area_sounds:
        return Decision.SUPPRESS
    elif (
        source is SoundSource.OTHER_PLAYER or sourceless_player
    ) and config.mute_other_area_sounds:
        return Decision.SUPPRESS
    elif source is SoundSource.NPC and config.mute_npc_area_sounds:
        return Decision.SUPPRESS
    elif (
        source is SoundSource.NONE
        and not sourceless_player
        and config.mute_environment_area_sounds
    ):
        return Decision.SUPPRESS

    return Decision.ALLOW


def classify_global_sound(sound_id: int, config: MuteConfig) -> Decision:
    """Decide whether a non-positional sound should be suppressed.

    Only prayer sounds are ever muted here.
    """
    if config.mute_prayer_sounds and sound_id in PRAYER_SOUNDS:
        return Decision.SUPPRESS
    return Decision.ALLOW


class AudioEventClassifier:
    """Applies the mute policy with the current config.

    The config provider is called on every classification, so changes to
    the mute flags apply to the very next sound.
    """

    def __init__(self, config_provider: MuteConfigProvider) -> None:
        self._config_provider = config_provider

    def classify_area(self, source: SoundSource, sound_id: int) -> Decision:
        return classify_area_sound(source, sound_id, self._config_provider())

    def classify_global(self, sound_id: int) -> Decision:
        return classify_global_sound(sound_id, self._config_provider())
