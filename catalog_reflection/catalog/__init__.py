"""Catalog model for relational metadata discovered from a data source."""

from .catalog import Catalog
from .schema import Schema, Table, Column, Index, ForeignKey

__all__ = ["Catalog", "Schema", "Table", "Column", "Index", "ForeignKey"]
