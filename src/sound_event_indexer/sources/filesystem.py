"""Filesystem bundle source.

This module provides a Source implementation that reads the asset index,
sound manifest and optional localization map from the paths of an
``IndexSettings`` record.
"""

import json
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from ..core.errors import MissingInputError, ParseError
from ..core.types import IndexSettings
from ..core.validator import (
    ASSET_INDEX_SCHEMA,
    LANGUAGE_SCHEMA,
    SOUND_MANIFEST_SCHEMA,
    format_validation_error,
    validate_document,
)
from .base import BundleData, Source


def is_existing_file(path: str | Path) -> bool:
    """Check that a configured path is set and names an existing file.

    An empty string means "not configured"; it must not fall through to
    ``Path("")``, which is the current directory.
    """
    if not str(path):
        return False
    try:
        return Path(path).is_file()
    except OSError:
        return False


def read_json_document(path: str | Path, schema_name: str) -> Any:
    """Read a JSON file and validate it against a bundled schema.

    Args:
        path: File to read
        schema_name: Name of the schema the document must satisfy

    Returns:
        The parsed document

    Raises:
        ParseError: If the file cannot be read, is not UTF-8 JSON, or fails
            validation
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(path, f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise ParseError(path, f"File is not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise ParseError(path, f"Cannot read file: {e.strerror or e}") from e

    try:
        validate_document(schema_name, document)
    except ValidationError as e:
        raise ParseError(path, format_validation_error(e)) from e

    return document


class FilesystemSource(Source):
    """Source adapter for a bundle laid out on the local filesystem.

    The object store directory is not checked here; individual objects are
    checked when variants are resolved.

    Example:
        >>> settings = IndexSettings(
        ...     asset_index_path='assets/indexes/17.json',
        ...     objects_dir='assets/objects',
        ...     sounds_json_path='sounds.json',
        ... )
        >>> bundle = FilesystemSource(settings).load_bundle()
        >>> len(bundle.sound_manifest)
        1624
    """

    def __init__(self, settings: IndexSettings):
        """Initialize filesystem source.

        Args:
            settings: Paths of the bundle documents
        """
        self.settings = settings

    def load_bundle(self) -> BundleData:
        """Read the three bundle documents.

        Returns:
            BundleData; the localization map is empty when no language file
            is configured or the configured one does not exist

        Raises:
            MissingInputError: If the asset index or sound manifest is missing
            ParseError: If any existing document is malformed
        """
        settings = self.settings

        # Both mandatory inputs are checked before anything is read
        if not is_existing_file(settings.asset_index_path):
            raise MissingInputError(settings.asset_index_path, "asset index")
        if not is_existing_file(settings.sounds_json_path):
            raise MissingInputError(settings.sounds_json_path, "sound manifest")

        asset_index = read_json_document(settings.asset_index_path, ASSET_INDEX_SCHEMA)
        sound_manifest = read_json_document(settings.sounds_json_path, SOUND_MANIFEST_SCHEMA)

        localization: dict[str, str] = {}
        if is_existing_file(settings.language_json_path):
            localization = read_json_document(settings.language_json_path, LANGUAGE_SCHEMA)

        return BundleData(
            asset_index=asset_index["objects"],
            sound_manifest=sound_manifest,
            objects_dir=Path(settings.objects_dir).resolve(),
            localization=localization,
        )
