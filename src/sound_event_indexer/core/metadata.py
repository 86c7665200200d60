"""Audio metadata extraction for resolved sound variants.

Objects in the store carry no file extension, so the container format is
detected from the payload by mutagen rather than from the file name.
"""

from pathlib import Path

import mutagen
from mutagen import MutagenError

AudioMetadata = dict[str, str]


def extract_audio_metadata(file_path: Path) -> AudioMetadata:
    """Extract metadata from an audio object using mutagen.

    Args:
        file_path: Path to the audio payload

    Returns:
        Dictionary with audio metadata (duration, sample_rate, bitrate, channels).
        Returns empty dict if the payload is not a recognized audio format
        or cannot be read.
    """
    try:
        audio = mutagen.File(str(file_path))
    except (MutagenError, OSError):
        return {}

    if audio is None or audio.info is None:
        return {}

    metadata: AudioMetadata = {}

    if getattr(audio.info, "length", None) is not None:
        metadata["duration"] = f"{audio.info.length:.2f}s"

    if getattr(audio.info, "sample_rate", None):
        metadata["sample_rate"] = str(audio.info.sample_rate)

    if getattr(audio.info, "bitrate", None):
        metadata["bitrate"] = str(audio.info.bitrate)

    if getattr(audio.info, "channels", None):
        metadata["channels"] = str(audio.info.channels)

    return metadata
