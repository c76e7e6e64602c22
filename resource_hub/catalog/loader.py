"""Catalog dataset loader with integrity hashing."""

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from resource_hub.catalog.models import REQUIRED_FIELDS

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base error for catalog loading problems."""
    pass


class CatalogNotFoundError(CatalogError):
    """Raised when the catalog file does not exist."""
    pass


class CatalogFormatError(CatalogError):
    """Raised when the catalog content is not a list of valid records."""
    pass


def compute_catalog_hash(content: str) -> str:
    """Compute SHA256 hash of catalog content.

    Args:
        content: Raw file content

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def validate_records(records: Any) -> list[dict[str, Any]]:
    """Check that parsed catalog content is a list of complete records.

    Args:
        records: Parsed document

    Returns:
        The records, unchanged

    Raises:
        CatalogFormatError: If the structure or any record is invalid
    """
    if not isinstance(records, list):
        raise CatalogFormatError(
            f"Catalog must be a list of records, got {type(records).__name__}"
        )

    seen_ids: set[Any] = set()
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogFormatError(f"Catalog record {index} is not a mapping")

        missing = [name for name in REQUIRED_FIELDS if name not in record]
        if missing:
            raise CatalogFormatError(
                f"Catalog record {index} missing fields: {', '.join(missing)}"
            )

        if not isinstance(record["tags"], list):
            raise CatalogFormatError(f"Catalog record {index} tags must be a list")

        if record["id"] in seen_ids:
            raise CatalogFormatError(f"Duplicate catalog id: {record['id']}")
        seen_ids.add(record["id"])

    return records


def load_catalog_file(path: Path) -> tuple[list[dict[str, Any]], str]:
    """Load a catalog file and compute its hash.

    JSON is a subset of YAML, so both formats are accepted.

    Args:
        path: Path to the catalog file

    Returns:
        Tuple of (validated records, SHA256 hash)

    Raises:
        CatalogNotFoundError: If the file doesn't exist
        CatalogFormatError: If the content is invalid
    """
    if not path.exists():
        raise CatalogNotFoundError(f"Catalog not found: {path}")

    content = path.read_text(encoding="utf-8")
    catalog_hash = compute_catalog_hash(content)

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CatalogFormatError(f"Catalog is not valid JSON/YAML: {exc}") from exc

    records = validate_records(parsed)

    logger.info(f"Loaded {len(records)} catalog records from {path} (hash={catalog_hash[:12]})")
    return records, catalog_hash
