"""Search query prefix parsing.

A query such as ``"@Karton 12"`` selects a single filter category (here
``box``) with the remainder as its value. Queries without a known prefix are a
free-text search term.
"""

from __future__ import annotations

from typing import Dict, Mapping

from pydantic import BaseModel, Field


class SearchQuery(BaseModel):
    """Parsed search input: either a free-text term or one category filter."""

    term: str = Field(default="", description="Free-text search term; empty when a filter prefix matched.")
    filters: Dict[str, str] = Field(
        default_factory=dict,
        description="Canonical category key -> filter value.",
        examples=[{"box": "12"}],
    )

    @property
    def is_filtered(self) -> bool:
        return bool(self.filters)


def parse_search_query(query: str, prefixes: Mapping[str, str]) -> SearchQuery:
    """
    Split a raw search string into a term or a category filter.

    Prefix matching is case-insensitive and requires whitespace after the
    prefix. Longer prefixes are tried first so overlapping aliases resolve the
    same way every time.

    Args:
        query: Raw text from the search box.
        prefixes: Prefix -> canonical category mapping, usually
            ``LocalizationService.get_search_prefixes()``.

    Returns:
        The parsed query.

    Examples:
        >>> parse_search_query("@Karton 12", {"@karton": "box"}).filters
        {'box': '12'}
        >>> parse_search_query("  rosen ", {"@karton": "box"}).term
        'rosen'
    """
    text = query.strip()
    lowered = text.lower()
    for prefix in sorted(prefixes, key=len, reverse=True):
        candidate = prefix.lower()
        if not lowered.startswith(candidate):
            continue
        rest = text[len(candidate):]
        if not rest or not rest[0].isspace():
            continue
        return SearchQuery(filters={prefixes[prefix]: rest.strip()})
    return SearchQuery(term=text)
