"""Data source connectors."""

from .base import CatalogSource
from .postgresql import PostgreSQLDataSource

__all__ = [
    "CatalogSource",
    "PostgreSQLDataSource",
]
