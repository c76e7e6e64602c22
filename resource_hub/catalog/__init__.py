"""Resource catalog loading and lookups."""

from resource_hub.catalog.catalog import ResourceCatalog
from resource_hub.catalog.loader import (
    CatalogError,
    CatalogFormatError,
    CatalogNotFoundError,
    load_catalog_file,
)
from resource_hub.catalog.models import DifficultyLevel, ResourceItem

__all__ = [
    "ResourceCatalog",
    "ResourceItem",
    "DifficultyLevel",
    "CatalogError",
    "CatalogFormatError",
    "CatalogNotFoundError",
    "load_catalog_file",
]
