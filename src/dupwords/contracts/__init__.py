"""Schema catalog and validation APIs."""

from .validate import CatalogEntry, load_catalog, schema_path, validate

__all__ = ["CatalogEntry", "load_catalog", "schema_path", "validate"]
