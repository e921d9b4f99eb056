"""Concrete preference store implementations.

* :class:`InMemoryPreferenceStore` – dictionary-backed store for tests and
  throwaway sessions.
* :class:`JsonFilePreferenceStore` – persists preferences as a flat JSON object
  in a file under the application base directory.

Preferences are non-critical: an unreadable file reads as empty and is logged,
never raised to the UI.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from samla.core.logging_config import get_logger

from .base import PreferenceStore

logger = get_logger(__name__)


class InMemoryPreferenceStore(PreferenceStore):
    """Process-local preference store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFilePreferenceStore(PreferenceStore):
    """
    Preference store backed by a JSON object file.

    The file holds a single object mapping preference keys to string values,
    e.g. ``{"samla-locale": "en"}``. Writes replace the whole file through a
    temporary sibling so a crash never leaves half-written JSON behind.

    Attributes:
        path: Location of the preferences file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize the store.

        Args:
            path: File to read and write. Parent folders are created on first write.
        """
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read preferences file %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring corrupt preferences file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preferences file %s: expected a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for `key`, or ``None`` if missing or unreadable."""
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        """
        Store `value` under `key`, keeping the other stored preferences.

        Raises:
            OSError: If the file or its folder cannot be written.
        """
        with self._lock:
            data = self._read()
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            try:
                tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
                tmp.replace(self.path)
            finally:
                tmp.unlink(missing_ok=True)
