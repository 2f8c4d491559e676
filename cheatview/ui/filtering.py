"""
Filter engine for the command list.

Two independent filters, never intersected: while a search is active the tag
filter is suspended and the list comes from the search alone. Both keep the
catalog's order.
"""

from typing import Optional, Sequence

from ..config.constants import ALL_TAG
from ..models.sheets import Catalog, Entry


def by_tag(entries: Sequence[Entry], tag: str) -> tuple[Entry, ...]:
    """Entries carrying ``tag`` (exact, case-sensitive); "all" keeps everything."""
    if tag == ALL_TAG:
        return tuple(entries)
    return tuple(entry for entry in entries if entry.has_tag(tag))


def by_search(entries: Sequence[Entry], query: str) -> tuple[Entry, ...]:
    """Entries whose name contains ``query``, ignoring case."""
    if not query:
        return tuple(entries)
    needle = query.casefold()
    return tuple(entry for entry in entries if needle in entry.name.casefold())


def unique_tags(entries: Sequence[Entry]) -> tuple[str, ...]:
    """Build the tag menu: "all" followed by every distinct tag, sorted."""
    tags = {tag for entry in entries for tag in entry.tags}
    tags.discard(ALL_TAG)
    return (ALL_TAG, *sorted(tags))


def derive_visible_entries(
    catalog: Optional[Catalog],
    tag_menu: Sequence[str],
    tag_index: int,
    query: Optional[str] = None,
) -> tuple[Entry, ...]:
    """The list the user sees.

    Args:
        catalog: Loaded sheet, or None before the first load
        tag_menu: Tag menu built by unique_tags
        tag_index: Selected tag, already clamped
        query: Search text while a search is active, otherwise None

    Returns:
        by_search over the whole catalog when ``query`` is not None, else
        by_tag with the selected tag
    """
    if catalog is None:
        return ()
    if query is not None:
        return by_search(catalog.entries, query)
    tag = tag_menu[tag_index] if tag_menu else ALL_TAG
    return by_tag(catalog.entries, tag)
