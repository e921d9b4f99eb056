"""Samla data transfer models.

Re-exports the record shapes exchanged with the backend (e.g. `SetDetails`,
`BagInfo`, `SetSearchResult`) and the coercion helpers used to build them from
mappings or JSON text.
"""

from samla.models.base import BaseSchema, convert_values, decode_payload
from samla.models.dto import (
    AppPaths,
    Bag,
    BagInfo,
    Box,
    Manufacturer,
    Product,
    ScanResult,
    SetDetails,
    SetSearchResult,
    StorageLocation,
    Tag,
    Type,
)

__all__ = [
    # Helpers
    "BaseSchema",
    "convert_values",
    "decode_payload",
    # Records
    "AppPaths",
    "Bag",
    "BagInfo",
    "Box",
    "Manufacturer",
    "Product",
    "ScanResult",
    "SetDetails",
    "SetSearchResult",
    "StorageLocation",
    "Tag",
    "Type",
]
