"""Discover the catalog of a PostgreSQL database: tables, columns, indexes, foreign keys."""

from .catalog import Catalog
from .builder import build_catalog, refresh_table_oids
from .errors import CatalogError, AmbiguousOrMissingTarget, InternalConsistencyError

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "build_catalog",
    "refresh_table_oids",
    "CatalogError",
    "AmbiguousOrMissingTarget",
    "InternalConsistencyError",
]
