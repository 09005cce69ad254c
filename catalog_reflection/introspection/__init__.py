"""Catalog discovery passes over the PostgreSQL system catalogs."""

from .lookups import list_schemas, current_schema, query_table_schema, list_table_oids
from .columns import list_all_columns, RELATION_KINDS
from .indexes import list_all_indexes
from .foreign_keys import list_all_fkeys, decode_rule, decode_match_rule

__all__ = [
    "list_schemas",
    "current_schema",
    "query_table_schema",
    "list_table_oids",
    "list_all_columns",
    "RELATION_KINDS",
    "list_all_indexes",
    "list_all_fkeys",
    "decode_rule",
    "decode_match_rule",
]
