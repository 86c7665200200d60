"""JSON Schema validation for bundle documents and index output.

This module loads the bundled JSON Schemas and validates the asset index,
sound manifest and localization map as they are read, as well as the
serialized index before it is written out.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

# Path to the schema files (relative to this module)
# src/sound_event_indexer/core/validator.py -> src/sound_event_indexer/schemas/
SCHEMA_DIR = Path(__file__).parent.parent / "schemas"

ASSET_INDEX_SCHEMA = "asset_index"
SOUND_MANIFEST_SCHEMA = "sound_manifest"
LANGUAGE_SCHEMA = "language"
SOUND_EVENTS_SCHEMA = "sound_events"


def load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from disk.

    Args:
        name: Schema name without the ``.schema.json`` suffix

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    schema_path = SCHEMA_DIR / f"{name}.schema.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def format_validation_error(error: ValidationError) -> str:
    """Render a validation error with the location of the offending value."""
    error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
    return f"Validation error at {error_path}: {error.message}"


def validate_document(name: str, document: Any) -> None:
    """Validate a document against one of the bundled schemas.

    Args:
        name: Schema name (e.g. ``ASSET_INDEX_SCHEMA``)
        document: Parsed JSON document

    Raises:
        ValidationError: If the document doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema(name)
    jsonschema.validate(instance=document, schema=schema)


def validate_sound_events(events: list[dict[str, Any]]) -> None:
    """Validate a serialized sound event list.

    Raises:
        ValidationError: If the list doesn't conform to the output schema
    """
    validate_document(SOUND_EVENTS_SCHEMA, events)


def validate_document_with_error_details(name: str, document: Any) -> tuple[bool, str | None]:
    """Validate a document and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        name: Schema name
        document: Parsed JSON document

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_document(name, document)
        return True, None
    except ValidationError as e:
        error_msg = format_validation_error(e)

        # Add context if available
        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"

        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
