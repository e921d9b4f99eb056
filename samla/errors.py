"""Error types for the Samla client core.

Defines a small hierarchy of exceptions raised when a backend payload cannot be
turned into a record, or when a caller asks for a locale the UI does not ship.
A missing translation key is not an error: lookups fall back to the key itself.
"""

from __future__ import annotations

from typing import Any


class SamlaError(Exception):
    """Base error for all Samla client exceptions."""


class MalformedPayloadError(SamlaError, ValueError):
    """Raised when a payload cannot be decoded or coerced into a record shape."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Malformed payload for '{shape}': {reason}")


class UnsupportedLocaleError(SamlaError, ValueError):
    """Raised when switching to a locale outside the supported set."""

    def __init__(self, value: Any, supported: tuple[str, ...]) -> None:
        self.value = value
        self.supported = supported
        super().__init__(f"Unsupported locale {value!r}; expected one of {', '.join(supported)}")
