"""Test helpers: a scripted catalog source standing in for PostgreSQL."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from catalog_reflection.datasources.base import CatalogSource


class RecordingSource(CatalogSource):
    """Replays scripted row sets in order and records every executed query."""

    def __init__(self, results: Optional[List[List[tuple]]] = None):
        super().__init__("recording")
        self.results: List[List[tuple]] = list(results or [])
        self.captured: List[Tuple[str, List[Any]]] = []
        self._connected = True

    def script(self, *row_sets: List[tuple]) -> "RecordingSource":
        self.results.extend(row_sets)
        return self

    def execute(self, query: str, params: Optional[Sequence[Any]] = None) -> List[tuple]:
        self.captured.append((query, list(params or [])))
        if not self.results:
            raise AssertionError(f"Unexpected query: {query}")
        return self.results.pop(0)

    def queries(self) -> List[str]:
        return [query for query, _ in self.captured]


def column_row(schema, table, position, name, type_name="integer",
               typmod=-1, not_null=False, default=None, oid=16384):
    """Row shaped like the column listing query."""
    return (schema, table, oid, position, name, type_name, typmod, not_null, default)


def index_row(schema, table, name, primary=False, unique=False, columns="id",
              predicate=None, definition=None, constraint_name=None,
              constraint_definition=None, oid=17000):
    """Row shaped like the index listing query."""
    if definition is None:
        definition = f"CREATE INDEX {name} ON {schema}.{table} USING btree ({columns})"
    return (schema, name, oid, schema, table, primary, unique, columns, predicate,
            definition, constraint_name, constraint_definition)


def fkey_row(schema, table, fschema, ftable, name, columns, fcolumns,
             update="a", delete="a", match="s", deferrable=False, deferred=False,
             definition=None):
    """Row shaped like the foreign key listing query."""
    if definition is None:
        definition = f"FOREIGN KEY ({columns}) REFERENCES {fschema}.{ftable}({fcolumns})"
    return (schema, table, fschema, ftable, name, columns, fcolumns,
            update, delete, match, deferrable, deferred, definition)
