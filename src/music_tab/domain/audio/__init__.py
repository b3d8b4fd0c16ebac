"""Sound effect mute policy."""

from .classifier import (
    AudioEventClassifier,
    Decision,
    MuteConfigProvider,
    SoundSource,
    classify_area_sound,
    classify_global_sound,
)

__all__ = [
    "AudioEventClassifier",
    "Decision",
    "MuteConfigProvider",
    "SoundSource",
    "classify_area_sound",
    "classify_global_sound",
]
