"""In-memory resource catalog.

The catalog is loaded once at startup and never mutated. Every lookup
returns a new list so callers cannot alter shared state.
"""

import json
from pathlib import Path
from typing import Any, Iterable

from resource_hub.catalog.loader import (
    compute_catalog_hash,
    load_catalog_file,
    validate_records,
)
from resource_hub.catalog.models import ResourceItem


class ResourceCatalog:
    """Immutable collection of support resources."""

    def __init__(self, items: Iterable[ResourceItem], content_hash: str = "") -> None:
        self._items: tuple[ResourceItem, ...] = tuple(items)
        self.content_hash = content_hash

    @classmethod
    def from_records(cls, records: list[dict[str, Any]]) -> "ResourceCatalog":
        """Build a catalog from already-parsed records."""
        validate_records(records)
        content = json.dumps(records, sort_keys=True)
        return cls(
            (ResourceItem.from_dict(record) for record in records),
            content_hash=compute_catalog_hash(content),
        )

    @classmethod
    def from_file(cls, path: Path) -> "ResourceCatalog":
        """Load a catalog from a JSON or YAML file."""
        records, catalog_hash = load_catalog_file(path)
        return cls(
            (ResourceItem.from_dict(record) for record in records),
            content_hash=catalog_hash,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def get_all(self) -> list[ResourceItem]:
        """Return every resource in catalog order."""
        return list(self._items)

    def get_by_id(self, resource_id: int) -> ResourceItem | None:
        """Return the resource with the given id, if any."""
        for item in self._items:
            if item.id == resource_id:
                return item
        return None

    def get_by_type(self, resource_type: str) -> list[ResourceItem]:
        """Return resources whose type equals resource_type, ignoring case."""
        wanted = resource_type.lower()
        return [item for item in self._items if item.type.lower() == wanted]

    def get_by_difficulty(self, level: str) -> list[ResourceItem]:
        """Return resources at the given difficulty level, ignoring case."""
        wanted = level.lower()
        return [item for item in self._items if item.difficulty_level.lower() == wanted]

    def search(self, keyword: str) -> list[ResourceItem]:
        """Case-insensitive substring search over title, description and tags."""
        needle = keyword.lower()
        return [
            item
            for item in self._items
            if needle in item.title.lower()
            or needle in item.description.lower()
            or any(needle in tag.lower() for tag in item.tags)
        ]
