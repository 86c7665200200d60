"""Loading of bundle settings.

Settings are persisted by the host application as a JSON object using the
camelCase keys ``assetIndexPath``, ``objectsDir``, ``soundsJsonPath`` and
``languageJsonPath``. This module only reads such files; it never writes
them.
"""

import json
from dataclasses import replace
from pathlib import Path

from .core.errors import MissingInputError, ParseError
from .core.types import IndexSettings


def load_settings(path: Path) -> IndexSettings:
    """Read settings from a JSON file.

    Args:
        path: Settings file

    Returns:
        IndexSettings built from the file's keys

    Raises:
        MissingInputError: If the file doesn't exist
        ParseError: If the file cannot be read or is not a JSON object
    """
    if not path.is_file():
        raise MissingInputError(path, "settings file")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(path, f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(path, f"Cannot read settings: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(path, "Settings must be a JSON object")

    return IndexSettings.from_mapping(data)


def merge_overrides(settings: IndexSettings, **overrides: str | None) -> IndexSettings:
    """Apply non-empty overrides on top of loaded settings.

    Example:
        >>> merge_overrides(settings, language_json_path="lang/en_us.json")
    """
    changes = {name: str(value) for name, value in overrides.items() if value}
    return replace(settings, **changes)
