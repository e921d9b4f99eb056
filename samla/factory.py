"""Convenience factories for wiring the Samla client core.

This module contains small helpers that build the localization service from
settings and bring up the pieces the UI needs at startup: logging, the
application folders and the locale preference.

The intent is to keep application wiring and tests concise, while still
allowing callers to pass their own settings or preference store.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from samla.core.config import Settings
from samla.core.logging_config import get_logger, setup_logging
from samla.core.paths import ensure_app_dirs, resolve_app_paths
from samla.i18n import JsonFilePreferenceStore, LocalizationService, PreferenceStore
from samla.models import AppPaths

logger = get_logger(__name__)


def build_localization_service(
    settings: Settings,
    paths: AppPaths,
    *,
    store: Optional[PreferenceStore] = None,
) -> LocalizationService:
    """Construct a ``LocalizationService`` from settings.

    Without an explicit `store`, preferences are kept in
    ``<base dir>/<SAMLA_PREFERENCES_FILE>``.
    """
    locale_cfg = settings.locale
    if store is None:
        store = JsonFilePreferenceStore(Path(paths.base_dir) / locale_cfg.preferences_file)
    return LocalizationService(
        store,
        storage_key=locale_cfg.storage_key,
        default_locale=locale_cfg.default_locale,
    )


@dataclass
class AppContext:
    """Services created at startup and shared with the UI layer."""

    settings: Settings
    paths: AppPaths
    i18n: LocalizationService


def bootstrap(settings: Optional[Settings] = None, *, store: Optional[PreferenceStore] = None) -> AppContext:
    """Configure logging, prepare application folders and restore the UI locale."""
    settings = settings or Settings()
    log_cfg = settings.logging
    setup_logging(
        log_level=log_cfg.level,
        log_format=log_cfg.format,
        enable_file=log_cfg.enable_file,
        log_file_dir=log_cfg.file_dir,
    )
    paths = resolve_app_paths(settings)
    ensure_app_dirs(paths)
    i18n = build_localization_service(settings, paths, store=store)
    logger.info("Samla started: base_dir=%s, locale=%s", paths.base_dir, i18n.locale.value)
    return AppContext(settings=settings, paths=paths, i18n=i18n)
