"""Samla.

Client core for the Samla desktop inventory of collectible sets (stamp sets and
similar), organized into sets, products, boxes, bags, storage locations,
manufacturers, types and tags.

Subpackages
-----------

- ``samla.i18n``: German/English UI strings, locale switching with a persisted
  preference, and bilingual search prefixes (``@karton``, ``@box`` ...).
- ``samla.models``: record shapes exchanged with the backend, built from plain
  mappings or JSON text.
- ``samla.core``: settings, logging and application folder resolution.

Typical startup
---------------

Most integrations call ``samla.factory.bootstrap()`` once and hand the returned
context's ``i18n`` service to the UI layer.
"""

__version__ = "0.1.0"
