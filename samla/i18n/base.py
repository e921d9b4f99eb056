"""Core types used by the localization subsystem.

This module defines :class:`Locale`, the closed set of UI languages, and
:class:`PreferenceStore`, a small runtime-checkable protocol for the client-side
storage that remembers the user's last selected locale across restarts.
Concrete stores live in :mod:`samla.i18n.preferences`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class Locale(str, Enum):
    """UI languages shipped with Samla."""

    de = "de"
    en = "en"


class SearchCategory(str, Enum):
    """Locale-independent filter keys that search prefixes resolve to."""

    box = "box"
    product = "product"
    manufacturer = "manufacturer"
    tag = "tag"
    location = "location"


@runtime_checkable
class PreferenceStore(Protocol):
    """Protocol for persisted client preferences.

    A preference store maps string keys to string values and survives
    application restarts. The localization service reads one key at startup
    and writes it on every locale change.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for `key`, or ``None`` when nothing is stored."""

        ...

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`."""

        ...
