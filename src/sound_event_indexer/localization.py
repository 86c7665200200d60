"""Display names and categories for sound event identifiers.

Event identifiers are dot-delimited (``block.stone.break``). Their display
names come from the game's localization map, which has no key for sound
events as such, so a list of candidate keys is tried in a fixed order:

1. For ``block``/``entity``/``item`` events, keys built from the segments
   between the category and the action: joined with ``_``, with the
   underscores removed, cut down to the first ``_`` piece, and finally the
   second segment alone.
2. For ``ambient``/``music``/``weather`` events, ``subtitles.<id>``.
3. For every event, ``subtitles.<id>`` as the last resort.

The first key with a non-empty translation wins and the action label of the
last segment, if any, is appended in parentheses. Without any match the
identifier itself is formatted for display.
"""

from .core.types import LocalizationMap

UNKNOWN_CATEGORY = "unknown"

# Categories whose middle segments name a block, entity or item
OBJECT_CATEGORIES = ("block", "entity", "item")

# Categories that only ever have subtitle translations
SUBTITLE_CATEGORIES = ("ambient", "music", "weather")

ACTION_LABELS: dict[str, str] = {
    "break": "破壊",
    "place": "設置",
    "step": "足音",
    "hit": "ヒット",
    "fall": "落下",
    "ambient": "環境音",
    "hurt": "ダメージ",
    "death": "死亡",
    "attack": "攻撃",
    "eat": "食べる",
    "drink": "飲む",
    "idle": "待機",
    "say": "鳴き声",
}


def extract_category(event_id: str) -> str:
    """Return the first dot-delimited segment of an event identifier.

    Example:
        "block.stone.break" -> "block"
        "nodots" -> "unknown"
    """
    if "." not in event_id:
        return UNKNOWN_CATEGORY
    return event_id.split(".")[0] or UNKNOWN_CATEGORY


def generate_candidate_keys(parts: list[str], event_id: str) -> list[str]:
    """Build localization keys to try, highest priority first.

    The order is significant and duplicates are kept; only the first key
    present in the localization map is used.

    Args:
        parts: ``event_id`` split on "."
        event_id: The full event identifier

    Returns:
        Candidate keys in priority order
    """
    keys: list[str] = []

    if len(parts) >= 2:
        category = parts[0]
        subject = "_".join(parts[1:-1])

        if category in OBJECT_CATEGORIES:
            keys.append(f"{category}.minecraft.{subject}")
            keys.append(f"{category}.minecraft.{subject.replace('_', '')}")

            if "_" in subject:
                keys.append(f"{category}.minecraft.{subject.split('_')[0]}")

            keys.append(f"{category}.minecraft.{parts[1]}")

        if category in SUBTITLE_CATEGORIES:
            keys.append(f"subtitles.{event_id}")

    keys.append(f"subtitles.{'.'.join(parts)}")

    return keys


def extract_action(event_id: str) -> str:
    """Return the translated action label of the last segment, or ""."""
    return ACTION_LABELS.get(event_id.split(".")[-1], "")


def format_event_id(event_id: str) -> str:
    """Format an identifier for display when no translation exists.

    Example:
        "custom.made.up.id" -> "Custom Made Up Id"
    """
    return " ".join(part[:1].upper() + part[1:] for part in event_id.split("."))


def resolve_display_name(event_id: str, localization: LocalizationMap) -> str:
    """Resolve the display name of a sound event.

    Args:
        event_id: Event identifier, e.g. "block.stone.break"
        localization: Localization key -> translated string

    Returns:
        "<translation> (<action>)", "<translation>", or the formatted id
    """
    parts = event_id.split(".")

    for key in generate_candidate_keys(parts, event_id):
        base_name = localization.get(key)
        if base_name:
            action = extract_action(event_id)
            return f"{base_name} ({action})" if action else base_name

    return format_event_id(event_id)
