"""Localization facade.

This subpackage defines the public surface for Samla's UI localization. It
re-exports the key types callers are expected to use:

- ``Locale`` – the supported UI languages (``de``, ``en``).
- ``LocalizationService`` – active locale, string lookup, locale switching and
  the merged bilingual search-prefix table.
- ``PreferenceStore`` – protocol for the persisted locale preference, with
  ``InMemoryPreferenceStore`` and ``JsonFilePreferenceStore`` implementations.
- ``parse_search_query`` / ``SearchQuery`` – prefix-aware search input parsing.

Higher layers should import from this module rather than individual
implementation files to keep the integration surface stable.
"""

from .base import Locale, PreferenceStore, SearchCategory
from .catalog import PREFIX_MERGE_ORDER, QUERY_ALIASES, SEARCH_PREFIXES, TRANSLATIONS
from .preferences import InMemoryPreferenceStore, JsonFilePreferenceStore
from .search import SearchQuery, parse_search_query
from .service import LocalizationService, coerce_locale

__all__ = [
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "Locale",
    "LocalizationService",
    "PREFIX_MERGE_ORDER",
    "PreferenceStore",
    "QUERY_ALIASES",
    "SEARCH_PREFIXES",
    "SearchCategory",
    "SearchQuery",
    "TRANSLATIONS",
    "coerce_locale",
    "parse_search_query",
]
