"""Index discovery for tables already registered by the column pass."""

import logging
from typing import Dict, List, Optional

from ..catalog import Catalog, Index
from ..datasources.base import CatalogSource
from ..errors import InternalConsistencyError
from ..filters.predicates import filter_clause
from . import queries

logger = logging.getLogger(__name__)


def split_names(value: Optional[str]) -> List[str]:
    """Split a comma-joined list of names; NULL or empty gives no names."""
    if not value:
        return []
    return value.split(",")


def list_all_indexes(
    source: CatalogSource,
    catalog: Catalog,
    including: Optional[Dict[str, List[str]]] = None,
    excluding: Optional[Dict[str, List[str]]] = None,
) -> Catalog:
    """Attach the indexes of every selected table.

    Raises:
        InternalConsistencyError: If an index belongs to a table the column
            pass did not register
    """
    include_sql, include_params = filter_clause(including, "rn.nspname", "r.relname")
    exclude_sql, exclude_params = filter_clause(excluding, "rn.nspname", "r.relname", negate=True)

    query = queries.LIST_INDEXES.format(including=include_sql, excluding=exclude_sql)
    params = include_params + exclude_params

    count = 0
    for row in source.execute(query, params):
        (_index_schema, index_name, oid, table_schema_name, table_name,
         primary, unique, columns, predicate, definition,
         constraint_name, constraint_definition) = row

        table_schema = catalog.get_schema(table_schema_name)
        if table_schema is None:
            raise InternalConsistencyError(
                f"Index {index_name} refers to unknown schema {table_schema_name}"
            )
        table = table_schema.get_table(table_name)
        if table is None:
            raise InternalConsistencyError(
                f"Index {index_name} refers to unknown table {table_schema_name}.{table_name}"
            )

        index = Index(
            name=index_name,
            definition=definition,
            primary=primary,
            unique=unique,
            oid=oid,
            columns=split_names(columns),
            predicate=predicate,
            constraint_name=constraint_name,
            constraint_definition=constraint_definition,
            # PostgreSQL always creates an index in its table's schema
            schema=table_schema,
        )
        table.add_index(index)
        count += 1

    logger.debug(f"Found {count} indexes")
    return catalog
