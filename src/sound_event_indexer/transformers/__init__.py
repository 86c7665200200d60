"""Transformers for converting manifest entries to sound events.

This package contains the transformer interface and the sound event
resolver built on it.
"""

from .base import Transformer
from .sound_events import (
    Resolution,
    SoundEventTransformer,
    asset_path_for,
    object_path_for,
    resolve_variant,
    sound_name_of,
)

__all__ = [
    "Resolution",
    "SoundEventTransformer",
    "Transformer",
    "asset_path_for",
    "object_path_for",
    "resolve_variant",
    "sound_name_of",
]
