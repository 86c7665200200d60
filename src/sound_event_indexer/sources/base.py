"""Base abstractions for bundle sources.

This module defines the interface a source must implement to feed an asset
bundle into the indexing pipeline, and the container it hands over.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from ..core.types import AssetIndex, LocalizationMap, SoundManifest


@dataclass
class BundleData:
    """Container for the parsed documents of one asset bundle.

    Attributes:
        asset_index: Virtual asset path -> object descriptor
        sound_manifest: Event identifier -> manifest entry, in file order
        objects_dir: Root of the content-addressed object store
        localization: Localization key -> translated string (may be empty)
    """

    asset_index: AssetIndex
    sound_manifest: SoundManifest
    objects_dir: Path
    localization: LocalizationMap = field(default_factory=dict)


class Source(ABC):
    """Abstract base class for bundle sources.

    Implementations know where the bundle documents live and how to read
    them. The pipeline only ever sees the resulting ``BundleData``.
    """

    @abstractmethod
    def load_bundle(self) -> BundleData:
        """Read and parse the bundle documents.

        Returns:
            BundleData with every document parsed

        Raises:
            MissingInputError: If a mandatory document does not exist
            ParseError: If a document is malformed
        """
        pass
