"""Basic indexing example.

This example demonstrates how to:
- Point the indexer at a local game installation
- Index its sound events
- Display summary statistics
- Save output to JSON file
"""

import json
import sys
from pathlib import Path

from sound_event_indexer import IndexSettings, create_pipeline


def main():
    # Change these to match your installation and asset index version
    assets_dir = Path.home() / ".minecraft" / "assets"
    settings = IndexSettings(
        asset_index_path=str(assets_dir / "indexes" / "17.json"),
        objects_dir=str(assets_dir / "objects"),
        sounds_json_path="sounds.json",
        language_json_path="ja_jp.json",
    )

    if not assets_dir.exists():
        print(f"Directory not found: {assets_dir}", file=sys.stderr)
        print("Please update the assets_dir variable in this script", file=sys.stderr)
        return

    print(f"Indexing sound events from: {assets_dir}", file=sys.stderr)

    events, report = create_pipeline(settings).index_with_report()

    # Display summary
    print("\n✓ Index generated successfully", file=sys.stderr)
    print(f"  Events: {report.events_indexed} of {report.events_seen}", file=sys.stderr)
    print(f"  Variants: {report.variants_resolved}", file=sys.stderr)
    print(f"  Skipped variants: {report.variants_skipped}", file=sys.stderr)

    # Save to file
    output_file = Path("sound_index.json")
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump([event.to_dict() for event in events], f, ensure_ascii=False, indent=2)

    print(f"\nIndex saved to {output_file}", file=sys.stderr)


if __name__ == "__main__":
    main()
