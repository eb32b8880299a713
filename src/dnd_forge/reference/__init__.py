"""Reference data: races, classes and backgrounds.

Exports:
    RaceDefinition, ClassDefinition, BackgroundDefinition: Typed records.
    ReferenceCatalog: Case-insensitive lookup over the records.
    get_catalog: Shared catalog (configured file or built-in SRD data).
"""

from __future__ import annotations

from dnd_forge.reference.catalog import ReferenceCatalog, clear_catalog_cache, get_catalog
from dnd_forge.reference.definitions import (
    BackgroundDefinition,
    ClassDefinition,
    RaceDefinition,
    ReferenceRecord,
)


__all__ = [
    "ReferenceRecord",
    "RaceDefinition",
    "ClassDefinition",
    "BackgroundDefinition",
    "ReferenceCatalog",
    "get_catalog",
    "clear_catalog_cache",
]
