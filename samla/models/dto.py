"""Backend record DTOs.

Pydantic models that mirror the records the Samla backend hands to the UI.
Attribute names are snake_case; the camelCase wire names produced by the alias
generator (e.g. ``friendlyName``, ``locationId``, ``serialNo``) are the
serialization contract with the backend and must not change.

Guidelines:
- Every field has a zero-value default so partial payloads still build.
- Optional ids (``manufacturerId``, ``typeId``) stay ``None`` when unset.
- Nested records are coerced with the same rules as top-level ones.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import BaseSchema, convert_values


class StorageLocation(BaseSchema):
    """A physical place where boxes are kept."""

    id: int = Field(default=0, description="Location identifier.")
    friendly_name: str = Field(
        default="", description="Display name of the location.", examples=["Arbeitszimmer Regal 2"]
    )
    room: str = Field(default="", description="Room the location is in.", examples=["Wohnzimmer"])
    shelf: str = Field(default="", description="Shelf within the room.", examples=["Regal 3"])
    compartment: str = Field(default="", description="Compartment on the shelf.", examples=["Fach A"])
    note: str = Field(default="", description="Free-form note.")


class Box(BaseSchema):
    """A box stored at a location."""

    id: int = Field(default=0, description="Box identifier.")
    location_id: int = Field(default=0, description="Identifier of the storage location holding the box.")
    code: str = Field(default="", description="Short, unique box code printed on the label.", examples=["K-12"])
    name: str = Field(default="", description="Optional human-readable box name.")


class Bag(BaseSchema):
    """A numbered bag inside a box; each bag holds exactly one set."""

    id: int = Field(default=0, description="Bag identifier.")
    box_id: int = Field(default=0, description="Identifier of the box holding the bag.")
    serial_no: str = Field(default="", description="Bag serial within its box.", examples=["0007"])


class BagInfo(BaseSchema):
    """Denormalized bag view joined with its box and storage location.

    Examples:
        {
            'id': 4, 'serialNo': '0004',
            'boxId': 2, 'boxCode': 'K-2', 'boxName': 'Weihnachten',
            'locationId': 1, 'locationName': 'Keller',
            'locationRoom': 'Keller', 'locationShelf': 'Regal 1',
            'locationCompartment': 'Fach B', 'locationNote': ''
        }
    """

    id: int = Field(default=0, description="Bag identifier.")
    serial_no: str = Field(default="", description="Bag serial within its box.")
    box_id: int = Field(default=0, description="Identifier of the containing box.")
    box_code: str = Field(default="", description="Code of the containing box.")
    box_name: str = Field(default="", description="Name of the containing box.")
    location_id: int = Field(default=0, description="Identifier of the box's storage location.")
    location_name: str = Field(default="", description="Friendly name of the storage location.")
    location_room: str = Field(default="", description="Room of the storage location.")
    location_shelf: str = Field(default="", description="Shelf of the storage location.")
    location_compartment: str = Field(default="", description="Compartment of the storage location.")
    location_note: str = Field(default="", description="Note attached to the storage location.")


class Manufacturer(BaseSchema):
    """Manufacturer lookup entry."""

    id: int = Field(default=0, description="Manufacturer identifier.")
    name: str = Field(default="", description="Manufacturer name.")


class Type(BaseSchema):
    """Set type lookup entry."""

    id: int = Field(default=0, description="Type identifier.")
    name: str = Field(default="", description="Type name.")


class Tag(BaseSchema):
    """Tag lookup entry."""

    id: int = Field(default=0, description="Tag identifier.")
    name: str = Field(default="", description="Tag name (stored lowercase by the backend).")


class Product(BaseSchema):
    """A single product belonging to a set."""

    id: int = Field(default=0, description="Product identifier.")
    set_id: int = Field(default=0, description="Identifier of the owning set.")
    name: str = Field(default="", description="Product name.", examples=["Briefmarke"])
    kind: str = Field(
        default="",
        description="Product kind as reported by the backend; typically '', 'stempel' or 'stanze'.",
        examples=["stempel"],
    )


class SetDetails(BaseSchema):
    """Aggregate view of one collectible set.

    ``manufacturer_id`` and ``type_id`` are ``None`` when the set has no
    manufacturer or type assigned. ``tags`` and ``products`` are always lists,
    even when the backend sends ``null``.

    Examples:
        >>> SetDetails.create_from({"id": 1, "name": "X", "tags": ["a", "b"], "products": []}).bag.id
        0
    """

    id: int = Field(default=0, description="Set identifier.")
    name: str = Field(default="", description="Set name.", examples=["Briefmarken Deutschland 2020"])
    manufacturer_id: Optional[int] = Field(default=None, description="Manufacturer identifier, if assigned.")
    manufacturer_name: str = Field(default="", description="Manufacturer name, empty when unassigned.")
    type_id: Optional[int] = Field(default=None, description="Type identifier, if assigned.")
    type_name: str = Field(default="", description="Type name, empty when unassigned.")
    bag: BagInfo = Field(default_factory=BagInfo, description="Bag, box and location the set is stored in.")
    photo_path: str = Field(default="", description="Photo path relative to the application base directory.")
    photo_source: str = Field(
        default="", description="How the photo was obtained (file, url, cropped, scan).", examples=["scan"]
    )
    tags: List[str] = Field(default_factory=list, description="Tag names in backend order.")
    products: List[Product] = Field(default_factory=list, description="Products of the set in backend order.")

    @field_validator("products", mode="before")
    @classmethod
    def _coerce_products(cls, v: Any) -> Any:
        """Convert each product payload with the shared record coercion rules."""
        return convert_values(v, Product)


class SetSearchResult(BaseSchema):
    """Denormalized row returned by the set search."""

    set_id: int = Field(default=0, description="Identifier of the matching set.")
    set_name: str = Field(default="", description="Name of the matching set.")
    manufacturer_name: str = Field(default="", description="Manufacturer name, empty when unassigned.")
    box_code: str = Field(default="", description="Code of the box holding the set.")
    box_name: str = Field(default="", description="Name of the box holding the set.")
    bag_serial: str = Field(default="", description="Serial of the bag holding the set.")
    location_name: str = Field(default="", description="Friendly name of the storage location.")
    tags: List[str] = Field(default_factory=list, description="Tag names attached to the set.")
    thumbnail_path: str = Field(default="", description="Photo path used as thumbnail.")


class AppPaths(BaseSchema):
    """Folders and files owned by the application."""

    base_dir: str = Field(default="", description="Application base directory.")
    data_dir: str = Field(default="", description="Directory holding the database.")
    images_dir: str = Field(default="", description="Directory holding set photos.")
    db_path: str = Field(default="", description="Path of the SQLite database file.")


class ScanResult(BaseSchema):
    """Outcome of an image scan: a preview data URL plus the stored relative path."""

    base64_data: str = Field(
        default="", description="Scanned image as a data URL.", examples=["data:image/png;base64,iVBORw0KGgo="]
    )
    rel_path: str = Field(default="", description="Path relative to the base directory.", examples=["Images/scan_1.png"])
