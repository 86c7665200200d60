"""Core utilities for sound bundle indexing.

This package contains the error taxonomy, type definitions, schema
validation and audio metadata extraction used by the source, transformer
and pipeline layers.
"""

from .errors import IndexingError, MissingInputError, ParseError
from .metadata import extract_audio_metadata
from .types import (
    AssetIndex,
    IndexReport,
    IndexSettings,
    LocalizationMap,
    SkipReason,
    SoundEventItem,
    SoundManifest,
    SoundVariant,
)
from .validator import (
    validate_document,
    validate_document_with_error_details,
    validate_sound_events,
)

__all__ = [
    "AssetIndex",
    "IndexReport",
    "IndexSettings",
    "IndexingError",
    "LocalizationMap",
    "MissingInputError",
    "ParseError",
    "SkipReason",
    "SoundEventItem",
    "SoundManifest",
    "SoundVariant",
    "extract_audio_metadata",
    "validate_document",
    "validate_document_with_error_details",
    "validate_sound_events",
]
