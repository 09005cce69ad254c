"""Catalog holding the schemas discovered from one database."""

import json
from typing import Any, Dict, Iterator, List, Optional

from .schema import Schema, Table


class Catalog:
    """Root container of discovered schema objects for one database."""

    def __init__(self, name: Optional[str] = None):
        """Initialize catalog.

        Args:
            name: Database name this catalog describes
        """
        self.name = name
        self.schemas: Dict[Optional[str], Schema] = {}

    def get_schema(self, name: Optional[str]) -> Optional[Schema]:
        """Get schema by name.

        Args:
            name: Schema name

        Returns:
            Schema if found, None otherwise
        """
        return self.schemas.get(name)

    def add_schema(self, name: Optional[str], target_name: Optional[str] = None) -> Schema:
        """Find or create a schema.

        Args:
            name: Schema name
            target_name: Destination schema name, when it differs

        Returns:
            The schema registered under ``name``
        """
        schema = self.schemas.get(name)
        if schema is None:
            schema = Schema(name=name, target_name=target_name)
            self.schemas[name] = schema
        return schema

    def get_table(self, schema_name: Optional[str], table_name: str) -> Optional[Table]:
        """Get table by schema and name.

        Args:
            schema_name: Schema name
            table_name: Table name

        Returns:
            Table if found, None otherwise
        """
        schema = self.get_schema(schema_name)
        if schema:
            return schema.get_table(table_name)
        return None

    def get_view(self, schema_name: Optional[str], view_name: str) -> Optional[Table]:
        """Get view by schema and name."""
        schema = self.get_schema(schema_name)
        if schema:
            return schema.get_view(view_name)
        return None

    def tables(self) -> Iterator[Table]:
        """Iterate over every table, in catalog order."""
        for schema in self.schemas.values():
            for table in schema.tables.values():
                yield table

    def views(self) -> Iterator[Table]:
        """Iterate over every view, in catalog order."""
        for schema in self.schemas.values():
            for view in schema.views.values():
                yield view

    def table_names(self) -> List[str]:
        """List schema-qualified names of every table."""
        return [table.qualified_name() for table in self.tables()]

    def count_tables(self) -> int:
        return sum(len(schema.tables) for schema in self.schemas.values())

    def count_views(self) -> int:
        return sum(len(schema.views) for schema in self.schemas.values())

    def count_indexes(self) -> int:
        return sum(len(table.indexes) for table in self.tables())

    def count_foreign_keys(self) -> int:
        return sum(len(table.foreign_keys) for table in self.tables())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "schemas": [schema.to_dict() for schema in self.schemas.values()],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"Catalog({self.name}, schemas={len(self.schemas)}, "
            f"tables={self.count_tables()})"
        )
