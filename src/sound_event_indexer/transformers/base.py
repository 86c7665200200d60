"""Base transformer class for converting manifest entries to index items.

This module defines the interface for transformers that turn one entry of
the sound manifest into an indexed sound event.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import SoundEventEntry, SoundEventItem
    from ..sources.base import BundleData
    from .sound_events import Resolution


class Transformer(ABC):
    """Abstract base class for event transformers.

    Transformers never raise for entries that cannot be indexed; they
    return a skipped ``Resolution`` naming the reason instead.
    """

    @abstractmethod
    def transform(
        self,
        event_id: str,
        entry: "SoundEventEntry",
        bundle: "BundleData",
    ) -> "Resolution[SoundEventItem]":
        """Transform one manifest entry into a sound event.

        Args:
            event_id: Identifier of the sound event
            entry: Manifest entry listing the event's sounds
            bundle: Parsed bundle documents

        Returns:
            Resolution holding the event, or the reason it was skipped
        """
        pass
