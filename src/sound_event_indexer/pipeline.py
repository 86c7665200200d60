"""Indexing pipeline for sound bundles.

This module provides the main interface for turning an asset bundle into
an ordered list of sound events: the source loads the documents, the
transformer resolves each manifest entry, and the collator orders the
survivors.
"""

from .collator import collate
from .core.errors import IndexingError
from .core.types import IndexReport, IndexSettings, SoundEventItem
from .sources.base import Source
from .sources.filesystem import FilesystemSource
from .transformers.base import Transformer
from .transformers.sound_events import SoundEventTransformer


class IndexingPipeline:
    """Main interface for sound event indexing.

    Each call re-reads the bundle; nothing is cached between calls.

    Example:
        >>> pipeline = IndexingPipeline(FilesystemSource(settings))
        >>> events, report = pipeline.index_with_report()
        >>> print(report.events_indexed, report.variants_skipped)
    """

    def __init__(self, source: Source, transformer: Transformer | None = None):
        """Initialize the pipeline.

        Args:
            source: Source to load the bundle from
            transformer: Transformer for manifest entries
                         (defaults to SoundEventTransformer)
        """
        self.source = source
        self.transformer = transformer or SoundEventTransformer()

    def index_with_report(self) -> tuple[list[SoundEventItem], IndexReport]:
        """Index the bundle and report what was skipped.

        Returns:
            Tuple of (events ordered by display name, report)

        Raises:
            MissingInputError: If a mandatory document is missing
            ParseError: If a document is malformed
        """
        bundle = self.source.load_bundle()
        report = IndexReport()
        events: list[SoundEventItem] = []

        for event_id, entry in bundle.sound_manifest.items():
            report.events_seen += 1
            result = self.transformer.transform(event_id, entry, bundle)

            for reason in result.skips:
                report.record_skip(reason)

            if not result.ok:
                report.record_skip(result.reason)  # type: ignore[arg-type]
                continue

            item: SoundEventItem = result.value  # type: ignore[assignment]
            report.variants_resolved += len(item.sounds)
            events.append(item)

        ordered = collate(events)
        report.events_indexed = len(ordered)
        return ordered, report

    def index(self) -> list[SoundEventItem]:
        """Index the bundle.

        Returns:
            Sound events ordered by display name
        """
        events, _ = self.index_with_report()
        return events


def create_pipeline(settings: IndexSettings) -> IndexingPipeline:
    """Create a pipeline reading the bundle from the settings' paths."""
    return IndexingPipeline(FilesystemSource(settings))


def index_sound_data(settings: IndexSettings) -> list[SoundEventItem]:
    """Index the bundle described by ``settings``.

    Args:
        settings: Paths of the asset index, object store, sound manifest
                  and (optional) localization file

    Returns:
        Sound events ordered by display name

    Raises:
        MissingInputError: If the asset index or sound manifest is missing
        ParseError: If a document is malformed
    """
    return create_pipeline(settings).index()


def index_sound_data_with_error_details(
    settings: IndexSettings,
) -> tuple[list[SoundEventItem], str | None]:
    """Index the bundle, turning indexing errors into a message.

    This is a convenience wrapper for hosts that show an empty list and a
    diagnostic rather than failing.

    Returns:
        Tuple of (events, error_message). error_message is None on success,
        and events is empty when it is set.
    """
    try:
        return index_sound_data(settings), None
    except IndexingError as e:
        return [], str(e)
