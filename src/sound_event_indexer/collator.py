"""Ordering of indexed sound events.

Display names mix Latin, kana and kanji, so they are ordered with ICU's
Japanese collation rather than by code point: Latin before kana before
kanji, kana in gojuon order and kanji in JIS X 0208 reading order.
Python's sort is stable, so events with equal names keep manifest order.
"""

from collections.abc import Iterable
from functools import lru_cache

import icu

from .core.types import SoundEventItem

COLLATION_LOCALE = "ja"


@lru_cache(maxsize=1)
def get_collator() -> icu.Collator:
    """Return the shared Japanese collator."""
    return icu.Collator.createInstance(icu.Locale(COLLATION_LOCALE))


def display_name_sort_key(display_name: str) -> bytes:
    """Collation sort key for a display name."""
    return get_collator().getSortKey(display_name)


def collate(events: Iterable[SoundEventItem]) -> list[SoundEventItem]:
    """Drop events without variants and order the rest by display name.

    Args:
        events: Resolved events in manifest order

    Returns:
        New list sorted by collated display name
    """
    kept = [event for event in events if event.sounds]
    return sorted(kept, key=lambda event: display_name_sort_key(event.display_name))
