"""Builtin UI string tables and search-prefix aliases.

Both tables are keyed by :class:`~samla.i18n.base.Locale` and wrapped in
read-only mappings. Keys are the opaque identifiers the UI asks for
(e.g. ``"newSet"``); values are the localized phrases.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .base import Locale, SearchCategory

_BOX = SearchCategory.box.value
_PRODUCT = SearchCategory.product.value
_MANUFACTURER = SearchCategory.manufacturer.value
_TAG = SearchCategory.tag.value
_LOCATION = SearchCategory.location.value


_DE: dict[str, str] = {
    # App
    "appName": "Samla",
    # Navigation & Actions
    "newSet": "Neues Set",
    "edit": "Bearbeiten",
    "delete": "Löschen",
    "save": "Speichern",
    "cancel": "Abbrechen",
    "close": "Schließen",
    "back": "Zurück",
    "add": "Hinzufügen",
    "remove": "Entfernen",
    "confirm": "Bestätigen",
    "search": "Suchen",
    # Menu
    "settings": "Einstellungen",
    "exportData": "Daten exportieren",
    "importData": "Daten importieren",
    # Search
    "searchPlaceholder": "Suchen... (@Box, @Produkt, @Hersteller, @Tag, @Ort)",
    "sortBy": "Sortieren",
    "sortName": "Name",
    "sortBox": "Box",
    "sortLocation": "Ort",
    "sortAdded": "Hinzugefügt",
    # Set Form
    "setName": "Set-Name",
    "setNamePlaceholder": "z.B. Briefmarken Deutschland 2020",
    "boxNumber": "Karton-Nr.",
    "bagNumber": "Beutel-Nr.",
    "auto": "Auto",
    # Location
    "location": "Ort",
    "room": "Raum",
    "roomPlaceholder": "z.B. Wohnzimmer",
    "shelf": "Regal",
    "shelfPlaceholder": "z.B. Regal 3",
    "compartment": "Fach",
    "compartmentPlaceholder": "z.B. Fach A",
    # Products
    "products": "Produkte",
    "product": "Produkt",
    "productName": "Produktname",
    "productNamePlaceholder": "z.B. Briefmarke",
    "manufacturer": "Hersteller",
    "manufacturerPlaceholder": "Hersteller wählen",
    "type": "Typ",
    "typePlaceholder": "Typ wählen",
    "quantity": "Menge",
    "addProduct": "Produkt hinzufügen",
    "noProducts": "Keine Produkte",
    # Tags
    "tags": "Tags",
    "tagsPlaceholder": "Tag eingeben und Enter drücken",
    # Images
    "photo": "Foto",
    "addPhoto": "Foto hinzufügen",
    "changePhoto": "Foto ändern",
    "removePhoto": "Foto entfernen",
    "cropImage": "Bild zuschneiden",
    # Master Data
    "masterData": "Stammdaten",
    "manufacturers": "Hersteller",
    "types": "Typen",
    "newManufacturer": "Neuer Hersteller",
    "newType": "Neuer Typ",
    "newTag": "Neuer Tag",
    # Empty States
    "noSets": "Keine Sets vorhanden",
    "noSetsDescription": "Erstellen Sie Ihr erstes Set, um zu beginnen.",
    "noResults": "Keine Ergebnisse",
    "noResultsDescription": "Versuchen Sie andere Suchbegriffe.",
    # Confirmations
    "confirmDelete": "Löschen bestätigen",
    "confirmDeleteSet": "Möchten Sie dieses Set wirklich löschen?",
    "confirmDeleteProduct": "Möchten Sie dieses Produkt wirklich löschen?",
    "confirmImport": "Import bestätigen",
    "confirmImportMessage": "Beim Import werden alle bestehenden Daten überschrieben. Fortfahren?",
    # Settings Panel
    "settingsTitle": "Einstellungen",
    "language": "Sprache",
    "german": "Deutsch",
    "english": "English",
    "dataManagement": "Datenverwaltung",
    "openDataFolder": "Datenordner öffnen",
    "storagePaths": "Speicherpfade",
    "baseDirectory": "Basisverzeichnis",
    "database": "Datenbank",
    "images": "Bilder",
    "statistics": "Statistiken",
    "statsSets": "Sets",
    "statsProducts": "Produkte",
    "statsManufacturers": "Hersteller",
    "statsTypes": "Typen",
    "statsTags": "Tags",
    "statsImages": "Bilder",
    "about": "Über",
    "version": "Version",
    # Messages
    "exportSuccess": "Export erfolgreich",
    "exportError": "Export fehlgeschlagen",
    "importSuccess": "Import erfolgreich",
    "importError": "Import fehlgeschlagen",
    "saveSuccess": "Gespeichert",
    "saveError": "Speichern fehlgeschlagen",
    "deleteSuccess": "Gelöscht",
    "deleteError": "Löschen fehlgeschlagen",
}

_EN: dict[str, str] = {
    # App
    "appName": "Samla",
    # Navigation & Actions
    "newSet": "New Set",
    "edit": "Edit",
    "delete": "Delete",
    "save": "Save",
    "cancel": "Cancel",
    "close": "Close",
    "back": "Back",
    "add": "Add",
    "remove": "Remove",
    "confirm": "Confirm",
    "search": "Search",
    # Menu
    "settings": "Settings",
    "exportData": "Export Data",
    "importData": "Import Data",
    # Search
    "searchPlaceholder": "Search... (@Box, @Product, @Manufacturer, @Tag, @Location)",
    "sortBy": "Sort by",
    "sortName": "Name",
    "sortBox": "Box",
    "sortLocation": "Location",
    "sortAdded": "Added",
    # Set Form
    "setName": "Set Name",
    "setNamePlaceholder": "e.g. Stamp Collection 2020",
    "boxNumber": "Box No.",
    "bagNumber": "Bag No.",
    "auto": "Auto",
    # Location
    "location": "Location",
    "room": "Room",
    "roomPlaceholder": "e.g. Living Room",
    "shelf": "Shelf",
    "shelfPlaceholder": "e.g. Shelf 3",
    "compartment": "Compartment",
    "compartmentPlaceholder": "e.g. Compartment A",
    # Products
    "products": "Products",
    "product": "Product",
    "productName": "Product Name",
    "productNamePlaceholder": "e.g. Stamp",
    "manufacturer": "Manufacturer",
    "manufacturerPlaceholder": "Select manufacturer",
    "type": "Type",
    "typePlaceholder": "Select type",
    "quantity": "Quantity",
    "addProduct": "Add Product",
    "noProducts": "No products",
    # Tags
    "tags": "Tags",
    "tagsPlaceholder": "Enter tag and press Enter",
    # Images
    "photo": "Photo",
    "addPhoto": "Add Photo",
    "changePhoto": "Change Photo",
    "removePhoto": "Remove Photo",
    "cropImage": "Crop Image",
    # Master Data
    "masterData": "Master Data",
    "manufacturers": "Manufacturers",
    "types": "Types",
    "newManufacturer": "New Manufacturer",
    "newType": "New Type",
    "newTag": "New Tag",
    # Empty States
    "noSets": "No sets yet",
    "noSetsDescription": "Create your first set to get started.",
    "noResults": "No results",
    "noResultsDescription": "Try different search terms.",
    # Confirmations
    "confirmDelete": "Confirm Delete",
    "confirmDeleteSet": "Are you sure you want to delete this set?",
    "confirmDeleteProduct": "Are you sure you want to delete this product?",
    "confirmImport": "Confirm Import",
    "confirmImportMessage": "Importing will overwrite all existing data. Continue?",
    # Settings Panel
    "settingsTitle": "Settings",
    "language": "Language",
    "german": "Deutsch",
    "english": "English",
    "dataManagement": "Data Management",
    "openDataFolder": "Open Data Folder",
    "storagePaths": "Storage Paths",
    "baseDirectory": "Base Directory",
    "database": "Database",
    "images": "Images",
    "statistics": "Statistics",
    "statsSets": "Sets",
    "statsProducts": "Products",
    "statsManufacturers": "Manufacturers",
    "statsTypes": "Types",
    "statsTags": "Tags",
    "statsImages": "Images",
    "about": "About",
    "version": "Version",
    # Messages
    "exportSuccess": "Export successful",
    "exportError": "Export failed",
    "importSuccess": "Import successful",
    "importError": "Import failed",
    "saveSuccess": "Saved",
    "saveError": "Save failed",
    "deleteSuccess": "Deleted",
    "deleteError": "Delete failed",
}

TRANSLATIONS: Mapping[Locale, Mapping[str, str]] = MappingProxyType(
    {
        Locale.de: MappingProxyType(_DE),
        Locale.en: MappingProxyType(_EN),
    }
)


# Both languages map to the same canonical category keys so users can type
# either language's prefix regardless of the active UI locale.
SEARCH_PREFIXES: Mapping[Locale, Mapping[str, str]] = MappingProxyType(
    {
        Locale.de: MappingProxyType(
            {
                "@box": _BOX,
                "@karton": _BOX,
                "@produkt": _PRODUCT,
                "@hersteller": _MANUFACTURER,
                "@tag": _TAG,
                "@ort": _LOCATION,
                "@raum": _LOCATION,
            }
        ),
        Locale.en: MappingProxyType(
            {
                "@box": _BOX,
                "@product": _PRODUCT,
                "@manufacturer": _MANUFACTURER,
                "@tag": _TAG,
                "@location": _LOCATION,
                "@room": _LOCATION,
            }
        ),
    }
)

# Later tables win on key collisions.
PREFIX_MERGE_ORDER: tuple[Locale, ...] = (Locale.de, Locale.en)

# Accepted by the search box but not part of the per-locale tables shown to
# users; the locale tables take precedence on overlap.
QUERY_ALIASES: Mapping[str, str] = MappingProxyType({"@standort": _LOCATION})
