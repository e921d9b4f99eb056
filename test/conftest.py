from __future__ import annotations

from pathlib import Path

import pytest

# Load dotenv files early so test fixtures can read overrides via os.getenv
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except ImportError:
    pass

from samla.i18n import InMemoryPreferenceStore, Locale, LocalizationService

SAMLA_ENV_VARS = (
    "SAMLA_LOG_LEVEL",
    "SAMLA_LOG_FORMAT",
    "SAMLA_ENABLE_FILE_LOGGING",
    "SAMLA_LOG_FILE_DIR",
    "SAMLA_BASE_DIR",
    "SAMLA_DEFAULT_LOCALE",
    "SAMLA_LOCALE_STORAGE_KEY",
    "SAMLA_PREFERENCES_FILE",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Remove SAMLA_* variables and run from an empty directory so no .env leaks in."""
    for name in SAMLA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def preference_store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def i18n(preference_store: InMemoryPreferenceStore) -> LocalizationService:
    return LocalizationService(preference_store)


@pytest.fixture
def i18n_en(preference_store: InMemoryPreferenceStore) -> LocalizationService:
    preference_store.set("samla-locale", Locale.en.value)
    return LocalizationService(preference_store)
