"""Sound Event Indexer.

This package indexes a game's audio asset bundle (content-addressed object
store, sound manifest and optional localization file) into a flat list of
sound events with display names and verified file paths.
"""

# Core library interface
from .pipeline import (
    IndexingPipeline,
    create_pipeline,
    index_sound_data,
    index_sound_data_with_error_details,
)
from .sources import BundleData, FilesystemSource, Source
from .transformers import Resolution, SoundEventTransformer, Transformer

# Core utilities
from .core import (
    IndexReport,
    IndexSettings,
    IndexingError,
    MissingInputError,
    ParseError,
    SkipReason,
    SoundEventItem,
    SoundVariant,
    extract_audio_metadata,
    validate_document,
    validate_document_with_error_details,
    validate_sound_events,
)
from .collator import collate
from .catalog import filter_events, list_categories
from .config import load_settings
from .localization import extract_category, resolve_display_name

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "IndexingPipeline",
    "create_pipeline",
    "index_sound_data",
    "index_sound_data_with_error_details",
    "Source",
    "FilesystemSource",
    "BundleData",
    "Transformer",
    "SoundEventTransformer",
    "Resolution",
    # Core utilities
    "IndexReport",
    "IndexSettings",
    "IndexingError",
    "MissingInputError",
    "ParseError",
    "SkipReason",
    "SoundEventItem",
    "SoundVariant",
    "extract_audio_metadata",
    "validate_document",
    "validate_document_with_error_details",
    "validate_sound_events",
    # Helpers
    "collate",
    "filter_events",
    "list_categories",
    "load_settings",
    "extract_category",
    "resolve_display_name",
]
