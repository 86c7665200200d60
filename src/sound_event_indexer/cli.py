"""Command-line interface for the sound event indexer.

This module provides the CLI entry point for indexing an asset bundle and
writing the resulting sound events to stdout as JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .catalog import filter_events, list_categories
from .config import load_settings, merge_overrides
from .core.errors import IndexingError
from .core.metadata import extract_audio_metadata
from .core.types import IndexReport, IndexSettings, SoundEventItem
from .core.validator import SOUND_EVENTS_SCHEMA, validate_document_with_error_details
from .pipeline import create_pipeline


def resolve_settings(args: argparse.Namespace) -> IndexSettings:
    """Combine the settings file (if any) with command-line overrides."""
    settings = load_settings(Path(args.settings)) if args.settings else IndexSettings()
    return merge_overrides(
        settings,
        asset_index_path=args.asset_index,
        objects_dir=args.objects,
        sounds_json_path=args.sounds,
        language_json_path=args.lang,
    )


def serialize_events(
    events: list[SoundEventItem], with_metadata: bool = False
) -> list[dict[str, Any]]:
    """Convert events to their JSON shape, optionally probing each variant."""
    serialized = [event.to_dict() for event in events]

    if with_metadata:
        for event, data in zip(events, serialized):
            for sound, sound_data in zip(event.sounds, data["sounds"]):
                sound_data["metadata"] = extract_audio_metadata(sound.absolute_path)

    return serialized


def summarize(report: IndexReport) -> str:
    """One-line summary of an indexing run."""
    return (
        f"Indexed {report.events_indexed} of {report.events_seen} sound events "
        f"({report.variants_resolved} variants, {report.variants_skipped} skipped)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sound-index",
        description="Index a game's sound assets into searchable sound events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Index using a saved settings file
  sound-index --settings settings.json > sounds.index.json

  # Explicit paths
  sound-index --asset-index assets/indexes/17.json --objects assets/objects \\
      --sounds sounds.json --lang ja_jp.json

  # Search within one category
  sound-index --settings settings.json --category block --query "stone break"
        """,
    )

    parser.add_argument("--settings", help="JSON settings file with the bundle paths")
    parser.add_argument("--asset-index", help="Asset index JSON file")
    parser.add_argument("--objects", help="Object store directory")
    parser.add_argument("--sounds", help="Sound manifest (sounds.json)")
    parser.add_argument("--lang", help="Localization file (optional)")

    parser.add_argument("--query", default="", help="Only events matching all keywords")
    parser.add_argument("--category", help="Only events of this category")

    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="Print the categories of the indexed events instead of the events",
    )
    parser.add_argument(
        "--with-metadata",
        action="store_true",
        help="Add audio metadata (duration, sample rate, ...) to every variant",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the indexing script."""
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)

        print(f"Indexing sound events from: {settings.sounds_json_path}", file=sys.stderr)
        events, report = create_pipeline(settings).index_with_report()
        print(summarize(report), file=sys.stderr)
    except IndexingError as e:
        print(f"Error: Failed to index sound data: {e}", file=sys.stderr)
        sys.exit(1)

    events = filter_events(events, args.query, args.category)

    if args.list_categories:
        json.dump(list_categories(events), sys.stdout, ensure_ascii=False, indent=2)
        print()
        return

    output = serialize_events(events, with_metadata=args.with_metadata)

    # Validate against JSON schema
    print("Validating output against schema...", file=sys.stderr)
    is_valid, error_msg = validate_document_with_error_details(SOUND_EVENTS_SCHEMA, output)

    if not is_valid:
        print("Error: Output validation failed:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        sys.exit(1)

    # Output JSON to stdout
    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    print()  # Add newline at end


if __name__ == "__main__":
    main()
