"""Type definitions for sound bundle indexing.

The TypedDict classes mirror the JSON documents described by the schemas in
``sound_event_indexer/schemas``. The dataclasses are the derived, immutable
values produced by an indexing run.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypedDict


class AssetObject(TypedDict, total=False):
    """Object descriptor for a single entry of the asset index."""

    hash: str  # Content hash (hex), also the object's file name
    size: int  # Payload size in bytes


class AssetIndexDocument(TypedDict):
    """Top-level shape of the asset index file."""

    objects: dict[str, AssetObject]  # Virtual path -> object descriptor


class SoundReference(TypedDict, total=False):
    """Object form of a sound entry in the manifest."""

    name: str  # Sound name, e.g. "dig/stone1"
    volume: float  # Playback volume (ignored by the indexer)
    pitch: float  # Playback pitch (ignored by the indexer)


class SoundEventEntry(TypedDict, total=False):
    """Manifest entry for one sound event."""

    sounds: list[str | SoundReference]


AssetIndex = dict[str, AssetObject]
SoundManifest = dict[str, SoundEventEntry]
LocalizationMap = dict[str, str]


class SkipReason(str, Enum):
    """Why a variant or event was left out of the index."""

    ASSET_NOT_INDEXED = "asset_not_indexed"  # Virtual path absent from the asset index
    OBJECT_MISSING = "object_missing"  # Hashed object absent from the object store
    NO_VARIANTS = "no_variants"  # Every listed variant was skipped


@dataclass(frozen=True)
class SoundVariant:
    """One concrete audio file backing a sound event."""

    name: str
    hash: str
    absolute_path: Path

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "hash": self.hash,
            "absolutePath": str(self.absolute_path),
        }


@dataclass(frozen=True)
class SoundEventItem:
    """A sound event with its display name and verified variants.

    Attributes:
        id: Event identifier as listed in the manifest, e.g. "block.stone.break"
        display_name: Localized or formatted name shown to users
        category: First dot-delimited segment of the id, or "unknown"
        sounds: Resolved variants, in manifest order
    """

    id: str
    display_name: str
    category: str
    sounds: tuple[SoundVariant, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "category": self.category,
            "sounds": [sound.to_dict() for sound in self.sounds],
        }


@dataclass(frozen=True)
class IndexSettings:
    """File-system locations of one asset bundle.

    An empty string means the location is not configured. Only
    ``language_json_path`` may legitimately stay empty.
    """

    asset_index_path: str = ""
    objects_dir: str = ""
    sounds_json_path: str = ""
    language_json_path: str = ""

    # Persisted settings use the host settings store's camelCase names
    _ALIASES = {
        "assetIndexPath": "asset_index_path",
        "objectsDir": "objects_dir",
        "soundsJsonPath": "sounds_json_path",
        "languageJsonPath": "language_json_path",
    }

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "IndexSettings":
        """Build settings from a camelCase or snake_case mapping.

        Unknown keys (such as ``exportDir``) are ignored and ``None`` values
        are treated as unset.
        """
        values: dict[str, str] = {}
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = "" if value is None else str(value)
        return cls(**values)


@dataclass
class IndexReport:
    """Counters describing what an indexing run kept and skipped."""

    events_seen: int = 0
    events_indexed: int = 0
    variants_resolved: int = 0
    skipped: dict[SkipReason, int] = field(default_factory=dict)

    def record_skip(self, reason: SkipReason) -> None:
        self.skipped[reason] = self.skipped.get(reason, 0) + 1

    @property
    def variants_skipped(self) -> int:
        return sum(
            count
            for reason, count in self.skipped.items()
            if reason is not SkipReason.NO_VARIANTS
        )
