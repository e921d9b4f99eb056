"""Localization service.

:class:`LocalizationService` owns the active UI locale. It resolves string keys
against the builtin tables, persists locale changes through a
:class:`~samla.i18n.base.PreferenceStore`, and exposes the merged bilingual
search-prefix table.

The service is meant to be created once at startup and injected wherever the
UI needs it, instead of reading a module-level global.
"""

from __future__ import annotations

import threading
from typing import Dict, Mapping, Optional, Union

from samla.core.logging_config import get_logger
from samla.errors import UnsupportedLocaleError

from .base import Locale, PreferenceStore
from .catalog import PREFIX_MERGE_ORDER, QUERY_ALIASES, SEARCH_PREFIXES, TRANSLATIONS
from .search import SearchQuery, parse_search_query

logger = get_logger(__name__)

DEFAULT_LOCALE = Locale.de
DEFAULT_STORAGE_KEY = "samla-locale"

SUPPORTED_LOCALES: tuple[str, ...] = tuple(loc.value for loc in Locale)


def coerce_locale(value: Union[Locale, str]) -> Locale:
    """Return the :class:`Locale` for `value` or raise :class:`UnsupportedLocaleError`."""
    if isinstance(value, Locale):
        return value
    try:
        return Locale(value)
    except ValueError as exc:
        raise UnsupportedLocaleError(value, SUPPORTED_LOCALES) from exc


class LocalizationService:
    """
    Active-locale holder with string lookup and search-prefix tables.

    Behavior:
    - ``translate`` never raises: unknown keys come back unchanged.
    - ``set_locale`` switches immediately and persists the choice; a failed
      write is logged and does not undo the switch.
    - ``get_search_prefixes`` merges the per-locale prefix tables in
      ``PREFIX_MERGE_ORDER`` (German, then English); later tables win.

    Reads and writes of the locale cell go through a lock so callbacks from
    more than one thread see a consistent value (last write wins). Switches
    are serialized with their preference write, so the stored locale always
    ends up equal to the active one.
    """

    def __init__(
        self,
        store: PreferenceStore,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        default_locale: Union[Locale, str] = DEFAULT_LOCALE,
        translations: Optional[Mapping[Locale, Mapping[str, str]]] = None,
        search_prefixes: Optional[Mapping[Locale, Mapping[str, str]]] = None,
        merge_order: tuple[Locale, ...] = PREFIX_MERGE_ORDER,
        query_aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the service and restore the saved locale.

        Args:
            store: Preference store holding the last selected locale.
            storage_key: Preference key for the locale.
            default_locale: Locale used when nothing valid is stored.
            translations: Optional override for the string tables. Structure: {locale: {key: phrase}}.
            search_prefixes: Optional override for the prefix tables. Structure: {locale: {prefix: category}}.
            merge_order: Order in which prefix tables are merged; later entries win.
            query_aliases: Extra prefixes accepted by ``parse_search_query`` only.
        """
        self._store = store
        self._storage_key = storage_key
        self._translations = translations if translations is not None else TRANSLATIONS
        self._search_prefixes = search_prefixes if search_prefixes is not None else SEARCH_PREFIXES
        self._merge_order = merge_order
        self._query_aliases = query_aliases if query_aliases is not None else QUERY_ALIASES
        self._lock = threading.Lock()
        self._switch_lock = threading.Lock()
        self._locale = self._restore(coerce_locale(default_locale))

    def _restore(self, fallback: Locale) -> Locale:
        saved = self._store.get(self._storage_key)
        if saved is None:
            return fallback
        try:
            return Locale(saved)
        except ValueError:
            logger.warning(
                "Ignoring unsupported saved locale %r under key %r; using %s",
                saved,
                self._storage_key,
                fallback.value,
            )
            return fallback

    @property
    def locale(self) -> Locale:
        """The active UI locale."""
        with self._lock:
            return self._locale

    def translate(self, key: str) -> str:
        """
        Resolve `key` for the active locale.

        Returns:
            The localized phrase, or `key` itself when the active table has no
            (or an empty) entry for it.
        """
        table = self._translations.get(self.locale) or {}
        phrase = table.get(key)
        return phrase if phrase else key

    t = translate

    def set_locale(self, new_locale: Union[Locale, str]) -> None:
        """
        Switch the active locale and persist the choice.

        Args:
            new_locale: A :class:`Locale` or its string value (``"de"`` or ``"en"``).

        Raises:
            UnsupportedLocaleError: If `new_locale` is outside the supported set.
        """
        locale = coerce_locale(new_locale)
        # Swap and persist under one lock.
        with self._switch_lock:
            with self._lock:
                previous = self._locale
                self._locale = locale
            try:
                self._store.set(self._storage_key, locale.value)
            except OSError as exc:
                logger.warning("Could not persist locale %s: %s", locale.value, exc)
        if previous is not locale:
            logger.info("UI locale switched: %s -> %s", previous.value, locale.value)

    def get_search_prefixes(self) -> Dict[str, str]:
        """Return every locale's search prefixes merged into one new mapping."""
        merged: Dict[str, str] = {}
        for locale in self._merge_order:
            merged.update(self._search_prefixes.get(locale) or {})
        return merged

    def parse_search_query(self, query: str) -> SearchQuery:
        """Parse `query` against the merged bilingual prefix table plus the query-only aliases."""
        prefixes = dict(self._query_aliases)
        prefixes.update(self.get_search_prefixes())
        return parse_search_query(query, prefixes)
