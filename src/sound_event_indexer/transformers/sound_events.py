"""Sound event transformer.

This module resolves manifest entries against the asset index and the
content-addressed object store. Every resolution step returns a
``Resolution`` so that misses, which are expected whenever the local store
is only partially populated, can be filtered and counted by the caller.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from ..core.types import (
    AssetIndex,
    SkipReason,
    SoundEventEntry,
    SoundEventItem,
    SoundReference,
    SoundVariant,
)
from ..localization import extract_category, resolve_display_name
from ..sources.base import BundleData
from .base import Transformer

T = TypeVar("T")

SOUND_ASSET_PREFIX = "minecraft/sounds/"
SOUND_ASSET_SUFFIX = ".ogg"


@dataclass(frozen=True)
class Resolution(Generic[T]):
    """Outcome of one resolution step: a value, or the reason there is none.

    Attributes:
        value: The resolved value, set only when ``ok``
        reason: Why the step produced nothing, set only when not ``ok``
        skips: Reasons collected from nested steps (e.g. skipped variants
            of an event that was still resolved)
    """

    value: T | None = None
    reason: SkipReason | None = None
    skips: tuple[SkipReason, ...] = ()

    @classmethod
    def resolved(cls, value: T, skips: tuple[SkipReason, ...] = ()) -> "Resolution[T]":
        return cls(value=value, skips=skips)

    @classmethod
    def skipped(cls, reason: SkipReason, skips: tuple[SkipReason, ...] = ()) -> "Resolution[T]":
        return cls(reason=reason, skips=skips)

    @property
    def ok(self) -> bool:
        return self.reason is None


def sound_name_of(sound: str | SoundReference) -> str:
    """Return the name of a manifest sound entry (bare string or object)."""
    if isinstance(sound, str):
        return sound
    return sound["name"]


def asset_path_for(sound_name: str) -> str:
    """Virtual asset path of a sound, e.g. "minecraft/sounds/dig/stone1.ogg"."""
    return f"{SOUND_ASSET_PREFIX}{sound_name}{SOUND_ASSET_SUFFIX}"


def object_path_for(objects_dir: Path, object_hash: str) -> Path:
    """Location of an object in the store, sharded by its first two hex chars."""
    return objects_dir / object_hash[:2] / object_hash


def lookup_hash(sound_name: str, asset_index: AssetIndex) -> Resolution[str]:
    """Find the content hash of a sound in the asset index."""
    entry = asset_index.get(asset_path_for(sound_name))
    if entry is None:
        return Resolution.skipped(SkipReason.ASSET_NOT_INDEXED)
    return Resolution.resolved(entry["hash"])


def locate_object(object_hash: str, objects_dir: Path) -> Resolution[Path]:
    """Find the object file for a hash, if the store holds it."""
    path = object_path_for(objects_dir, object_hash)
    if not path.is_file():
        return Resolution.skipped(SkipReason.OBJECT_MISSING)
    return Resolution.resolved(path)


def resolve_variant(
    sound: str | SoundReference,
    asset_index: AssetIndex,
    objects_dir: Path,
) -> Resolution[SoundVariant]:
    """Resolve one manifest sound entry to a verified file.

    Args:
        sound: Bare sound name or object with a ``name`` (volume and pitch
            are ignored)
        asset_index: Virtual asset path -> object descriptor
        objects_dir: Root of the object store

    Returns:
        Resolution holding the variant, or why it could not be resolved
    """
    sound_name = sound_name_of(sound)

    found_hash = lookup_hash(sound_name, asset_index)
    if not found_hash.ok:
        return Resolution.skipped(found_hash.reason)  # type: ignore[arg-type]
    object_hash: str = found_hash.value  # type: ignore[assignment]

    located = locate_object(object_hash, objects_dir)
    if not located.ok:
        return Resolution.skipped(located.reason)  # type: ignore[arg-type]

    return Resolution.resolved(
        SoundVariant(
            name=sound_name.split("/")[-1] or sound_name,
            hash=object_hash,
            absolute_path=located.value,  # type: ignore[arg-type]
        )
    )


class SoundEventTransformer(Transformer):
    """Transformer producing ``SoundEventItem`` values.

    An event is kept only if at least one of its sounds resolves to a file
    in the object store.
    """

    def transform(
        self,
        event_id: str,
        entry: SoundEventEntry,
        bundle: BundleData,
    ) -> Resolution[SoundEventItem]:
        """Resolve the category, display name and variants of an event.

        Args:
            event_id: Identifier of the sound event
            entry: Manifest entry listing the event's sounds
            bundle: Parsed bundle documents

        Returns:
            Resolution holding the event, or ``NO_VARIANTS`` when every
            sound was skipped. Skipped variants are listed in ``skips``.
        """
        variants: list[SoundVariant] = []
        skips: list[SkipReason] = []

        for sound in entry.get("sounds", []):
            result = resolve_variant(sound, bundle.asset_index, bundle.objects_dir)
            if result.ok:
                variants.append(result.value)  # type: ignore[arg-type]
            else:
                skips.append(result.reason)  # type: ignore[arg-type]

        if not variants:
            return Resolution.skipped(SkipReason.NO_VARIANTS, tuple(skips))

        item = SoundEventItem(
            id=event_id,
            display_name=resolve_display_name(event_id, bundle.localization),
            category=extract_category(event_id),
            sounds=tuple(variants),
        )
        return Resolution.resolved(item, tuple(skips))
