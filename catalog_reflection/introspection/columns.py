"""Column discovery: registers schemas, tables and views with their columns."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..catalog import Catalog, Column, Schema, Table
from ..datasources.base import CatalogSource
from ..filters.predicates import filter_clause
from . import queries

logger = logging.getLogger(__name__)

# pg_class.relkind codes per kind of relation
RELATION_KINDS: Dict[str, Tuple[str, ...]] = {
    "table": ("r", "p"),
    "view": ("v", "m"),
    "index": ("i",),
    "sequence": ("S",),
}

# atttypmod of variable-length types includes the 4-byte varlena header
VARHDRSZ = 4


def normalize_typmod(typmod: Optional[int]) -> Optional[int]:
    """Strip the header offset from a raw type modifier; -1 means none."""
    if typmod is None or typmod < 0:
        return None
    if typmod >= VARHDRSZ:
        return typmod - VARHDRSZ
    return typmod


def list_all_columns(
    source: CatalogSource,
    catalog: Catalog,
    kind: str = "table",
    including: Optional[Dict[str, List[str]]] = None,
    excluding: Optional[Dict[str, List[str]]] = None,
) -> Catalog:
    """Register every relation of ``kind`` with its columns into ``catalog``.

    Schemas and relations are created on first sight; columns keep their
    ordinal order within each relation.
    """
    relkinds = RELATION_KINDS[kind]
    include_sql, include_params = filter_clause(including, "n.nspname", "c.relname")
    exclude_sql, exclude_params = filter_clause(excluding, "n.nspname", "c.relname", negate=True)

    query = queries.LIST_COLUMNS.format(including=include_sql, excluding=exclude_sql)
    params: List[Any] = [list(relkinds)] + include_params + exclude_params

    touched: Dict[Tuple[str, str], Table] = {}
    count = 0
    for row in source.execute(query, params):
        (schema_name, relation_name, oid, position, column_name,
         type_name, typmod, not_null, default) = row

        schema = catalog.add_schema(schema_name)
        relation = _find_or_create_relation(schema, relation_name, kind)
        if relation.oid is None:
            relation.oid = oid

        relation.add_column(
            Column(
                name=column_name,
                type_name=type_name,
                typmod=normalize_typmod(typmod),
                nullable=not not_null,
                default=default,
                position=position,
            )
        )
        touched[(schema_name, relation_name)] = relation
        count += 1

    for relation in touched.values():
        relation.sort_columns()

    logger.debug(f"Found {count} columns in {len(touched)} {kind} relations")
    return catalog


def _find_or_create_relation(schema: Schema, name: str, kind: str) -> Table:
    if kind == "view":
        view = schema.get_view(name)
        if view is None:
            view = schema.add_view(Table(name=name))
        return view

    table = schema.get_table(name)
    if table is None:
        table = schema.add_table(Table(name=name))
    return table
