"""Filter expressions scoping catalog discovery.

A filter expression maps a schema name to a list of regular expressions;
an object is selected when it lives in one of the schemas and its name
matches any of that schema's patterns. Dict insertion order is kept so
that generated predicates come out in a stable order.
"""

import logging
from typing import Dict, List, Optional, Union

from ..catalog import Catalog, Schema
from ..datasources.base import CatalogSource
from ..introspection.lookups import current_schema, query_table_schema
from .quoting import TableReference, fold_identifier, parse_table_reference, unquote

logger = logging.getLogger(__name__)

FilterExpression = Dict[str, List[str]]


def anchored_pattern(name: str) -> str:
    """Build the pattern matching exactly ``name`` (quotes removed)."""
    return f"^{unquote(name)}$"


def filter_for_table(
    source: CatalogSource, table: Union[str, TableReference]
) -> FilterExpression:
    """Build a one-schema, one-pattern filter selecting a single table.

    Unquoted parts fold to lower case as PostgreSQL folds them. When the
    reference has no schema, the source is asked which schema currently
    resolves the name.
    """
    if isinstance(table, str):
        table = parse_table_reference(table)

    if table.schema:
        schema_name = fold_identifier(table.schema)
    else:
        schema_name = query_table_schema(source, table.sql())
        logger.debug(f"Table {table} resolves to schema {schema_name}")

    return {schema_name: [f"^{fold_identifier(table.name)}$"]}


def filter_for_catalog(source: CatalogSource, catalog: Catalog) -> FilterExpression:
    """Build a filter selecting every table and view of another catalog.

    Objects land in their schema's target name; objects without one go to
    the source's current schema, which is queried at most once.
    """
    expression: FilterExpression = {}
    default_schema: Optional[str] = None

    def resolve_schema(schema: Schema) -> str:
        nonlocal default_schema
        name = schema.effective_target_name()
        if name:
            return unquote(name)
        if default_schema is None:
            default_schema = current_schema(source)
        return default_schema

    for schema in catalog.schemas.values():
        for relation in list(schema.tables.values()) + list(schema.views.values()):
            schema_name = resolve_schema(schema)
            patterns = expression.setdefault(schema_name, [])
            patterns.append(anchored_pattern(relation.name))

    return expression


def filter_from_expression(expression: Optional[FilterExpression]) -> Optional[FilterExpression]:
    """Use a caller-supplied filter expression as is."""
    return expression
