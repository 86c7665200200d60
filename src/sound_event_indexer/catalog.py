"""Search and category filtering over an indexed event list.

Example:
    >>> events = index_sound_data(settings)
    >>> list_categories(events)
    ['ambient', 'block', 'entity', 'music_disc']
    >>> [e.id for e in filter_events(events, "stone break", category="block")]
    ['block.stone.break']
"""

from collections.abc import Iterable

from .core.types import SoundEventItem


def split_keywords(query: str) -> list[str]:
    """Lower-case a search query and split it into non-empty keywords."""
    return query.lower().split()


def matches_keywords(event: SoundEventItem, keywords: list[str]) -> bool:
    """Check that every keyword occurs in the display name or the id."""
    display_name = event.display_name.lower()
    event_id = event.id.lower()
    return all(keyword in display_name or keyword in event_id for keyword in keywords)


def filter_events(
    events: Iterable[SoundEventItem],
    query: str = "",
    category: str | None = None,
) -> list[SoundEventItem]:
    """Filter events by search query and category, keeping their order.

    Args:
        events: Indexed events
        query: Whitespace-separated keywords; all must match
        category: Only keep events of this category (None keeps all)

    Returns:
        Matching events in input order
    """
    keywords = split_keywords(query)
    return [
        event
        for event in events
        if (not category or event.category == category) and matches_keywords(event, keywords)
    ]


def list_categories(events: Iterable[SoundEventItem]) -> list[str]:
    """Return the distinct categories of the events, sorted."""
    return sorted({event.category for event in events})
