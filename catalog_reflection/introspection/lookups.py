"""Single-purpose lookups against the source catalog."""

import logging
from typing import Dict, List, Optional

from ..datasources.base import CatalogSource
from . import queries

logger = logging.getLogger(__name__)


def list_schemas(source: CatalogSource) -> List[str]:
    """List user schema names, system schemas excluded."""
    rows = source.execute(queries.LIST_SCHEMAS)
    return [row[0] for row in rows]


def current_schema(source: CatalogSource) -> str:
    """Return the schema unqualified names currently resolve to."""
    rows = source.execute(queries.CURRENT_SCHEMA)
    return rows[0][0]


def query_table_schema(source: CatalogSource, table_name: str) -> Optional[str]:
    """Return the schema the given (possibly quoted) table name resolves to."""
    rows = source.execute(queries.TABLE_SCHEMA, [table_name])
    if not rows:
        return None
    return rows[0][0]


def list_table_oids(source: CatalogSource, table_names: List[str]) -> Dict[str, int]:
    """Map table names to object identifiers in one round trip.

    Names are resolved the way the source resolves them in a query, so
    quoted and schema-qualified names are accepted.
    """
    if not table_names:
        return {}
    rows = source.execute(queries.TABLE_OIDS, [list(table_names)])
    return {name: oid for name, oid in rows}
