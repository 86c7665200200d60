"""Shared fixtures: a small asset bundle laid out in a temporary directory."""

import json
from pathlib import Path

import pytest

from sound_event_indexer.core.types import IndexSettings

STONE1_HASH = "ab" + "1" * 38  # indexed and present in the store
STONE2_HASH = "cd" + "2" * 38  # indexed but absent from the store
WAIT_HASH = "ef" + "3" * 38
CAVE_HASH = "12" + "4" * 38

ASSET_INDEX = {
    "objects": {
        "minecraft/sounds/dig/stone1.ogg": {"hash": STONE1_HASH, "size": 12},
        "minecraft/sounds/dig/stone2.ogg": {"hash": STONE2_HASH, "size": 12},
        "minecraft/sounds/records/wait.ogg": {"hash": WAIT_HASH, "size": 12},
        "minecraft/sounds/ambient/cave/cave1.ogg": {"hash": CAVE_HASH, "size": 12},
        "minecraft/lang/ja_jp.json": {"hash": "99" + "9" * 38, "size": 40},
    }
}

SOUND_MANIFEST = {
    "block.stone.break": {"sounds": ["dig/stone1", "dig/stone2"]},
    "entity.cow.say": {"sounds": ["entity/cow/say1"]},
    "music_disc.wait": {"sounds": [{"name": "records/wait", "stream": True}]},
    "ambient.cave": {"sounds": [{"name": "ambient/cave/cave1", "volume": 0.5, "pitch": 1.2}]},
    "block.stone.place": {"sounds": ["dig/stone1"]},
}

LOCALIZATION = {
    "block.minecraft.stone": "石",
    "subtitles.ambient.cave": "不気味な音",
}


def write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def write_object(objects_dir: Path, object_hash: str, payload: bytes = b"not audio data") -> Path:
    """Store a payload the way the object store shards it."""
    path = objects_dir / object_hash[:2] / object_hash
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    return path


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    """A bundle whose store holds every indexed object except STONE2_HASH."""
    objects_dir = tmp_path / "assets" / "objects"
    for object_hash in (STONE1_HASH, WAIT_HASH, CAVE_HASH):
        write_object(objects_dir, object_hash)

    write_json(tmp_path / "assets" / "indexes" / "17.json", ASSET_INDEX)
    write_json(tmp_path / "sounds.json", SOUND_MANIFEST)
    write_json(tmp_path / "ja_jp.json", LOCALIZATION)
    return tmp_path


@pytest.fixture
def settings(bundle_dir: Path) -> IndexSettings:
    return IndexSettings(
        asset_index_path=str(bundle_dir / "assets" / "indexes" / "17.json"),
        objects_dir=str(bundle_dir / "assets" / "objects"),
        sounds_json_path=str(bundle_dir / "sounds.json"),
        language_json_path=str(bundle_dir / "ja_jp.json"),
    )


def deny_reading(monkeypatch: pytest.MonkeyPatch, denied: Path) -> None:
    """Make opening ``denied`` fail as if permission were missing."""
    real_open = Path.open

    def fake_open(self: Path, *args, **kwargs):
        if self == denied:
            raise PermissionError(13, "Permission denied", str(self))
        return real_open(self, *args, **kwargs)

    monkeypatch.setattr(Path, "open", fake_open)
