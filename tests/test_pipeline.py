"""Tests for the indexing pipeline."""

from pathlib import Path

import pytest

from sound_event_indexer import (
    IndexingPipeline,
    index_sound_data,
    index_sound_data_with_error_details,
)
from sound_event_indexer.core.errors import MissingInputError
from sound_event_indexer.core.types import IndexSettings, SkipReason
from sound_event_indexer.sources.filesystem import FilesystemSource

from conftest import STONE1_HASH, deny_reading


# Latin, then kanji by reading: 石 (seki) < 不 (fu); 設 (setsu) < 破 (ha)
EXPECTED_ORDER = [
    "Music_disc Wait",
    "石 (設置)",
    "石 (破壊)",
    "不気味な音",
]


class TestIndexSoundData:
    """Test end-to-end indexing of the fixture bundle."""

    def test_orders_by_display_name(self, settings: IndexSettings) -> None:
        """Test that events are ordered by Japanese collation of display names."""
        events = index_sound_data(settings)

        assert [e.display_name for e in events] == EXPECTED_ORDER

    def test_event_with_unindexed_sound_is_omitted(self, settings: IndexSettings) -> None:
        """Test that an event whose only sound is unindexed is left out."""
        ids = [e.id for e in index_sound_data(settings)]
        assert "entity.cow.say" not in ids

    def test_every_event_has_existing_variants(self, settings: IndexSettings) -> None:
        """Test that every emitted variant points at an existing absolute path."""
        for event in index_sound_data(settings):
            assert event.sounds
            for sound in event.sounds:
                assert sound.absolute_path.is_absolute()
                assert sound.absolute_path.is_file()

    def test_partial_event_keeps_resolved_variants(self, settings: IndexSettings) -> None:
        """Test that an event keeps the variants that did resolve."""
        events = {e.id: e for e in index_sound_data(settings)}

        stone_break = events["block.stone.break"]
        assert stone_break.category == "block"
        assert [s.hash for s in stone_break.sounds] == [STONE1_HASH]
        assert stone_break.sounds[0].absolute_path == (
            Path(settings.objects_dir).resolve() / "ab" / STONE1_HASH
        )

    def test_categories(self, settings: IndexSettings) -> None:
        """Test that categories come from the first id segment."""
        events = {e.id: e.category for e in index_sound_data(settings)}
        assert events["music_disc.wait"] == "music_disc"
        assert events["ambient.cave"] == "ambient"

    def test_without_localization_names_are_formatted(self, settings: IndexSettings) -> None:
        """Test that names fall back to the formatted id without a language file."""
        settings = IndexSettings(
            asset_index_path=settings.asset_index_path,
            objects_dir=settings.objects_dir,
            sounds_json_path=settings.sounds_json_path,
        )

        names = [e.display_name for e in index_sound_data(settings)]
        assert names == ["Ambient Cave", "Block Stone Break", "Block Stone Place", "Music_disc Wait"]

    def test_idempotent(self, settings: IndexSettings) -> None:
        """Test that repeated runs return equal ordered lists."""
        assert index_sound_data(settings) == index_sound_data(settings)

    def test_missing_sound_manifest_raises(self, settings: IndexSettings, tmp_path: Path) -> None:
        """Test that a missing sound manifest fails instead of returning a partial list."""
        settings = IndexSettings(
            asset_index_path=settings.asset_index_path,
            objects_dir=settings.objects_dir,
            sounds_json_path=str(tmp_path / "missing-sounds.json"),
        )

        with pytest.raises(MissingInputError):
            index_sound_data(settings)


class TestIndexReport:
    """Test the per-run report."""

    def test_counts(self, settings: IndexSettings) -> None:
        """Test that kept and skipped units are counted by reason."""
        events, report = IndexingPipeline(FilesystemSource(settings)).index_with_report()

        assert report.events_seen == 5
        assert report.events_indexed == len(events) == 4
        assert report.variants_resolved == 4
        assert report.skipped == {
            SkipReason.OBJECT_MISSING: 1,
            SkipReason.ASSET_NOT_INDEXED: 1,
            SkipReason.NO_VARIANTS: 1,
        }
        assert report.variants_skipped == 2


class TestIndexWithErrorDetails:
    """Test the non-raising wrapper."""

    def test_success(self, settings: IndexSettings) -> None:
        """Test that a successful run has no error message."""
        events, error = index_sound_data_with_error_details(settings)
        assert error is None
        assert len(events) == 4

    def test_failure_returns_empty_list(self) -> None:
        """Test that missing inputs give an empty list and a message."""
        events, error = index_sound_data_with_error_details(IndexSettings())
        assert events == []
        assert "asset index" in error

    def test_unreadable_manifest_returns_empty_list(
        self, settings: IndexSettings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a read failure is reported, not raised."""
        deny_reading(monkeypatch, Path(settings.sounds_json_path))

        events, error = index_sound_data_with_error_details(settings)

        assert events == []
        assert "Cannot read file" in error
