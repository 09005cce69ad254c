"""Foreign key discovery and endpoint resolution."""

import logging
from typing import Dict, List, Optional

from ..catalog import Catalog, ForeignKey
from ..datasources.base import CatalogSource
from ..filters.predicates import filter_clause
from ..utils.logging import NOTICE
from . import queries
from .indexes import split_names

logger = logging.getLogger(__name__)

# pg_constraint.confupdtype / confdeltype
RULE_ACTIONS: Dict[str, str] = {
    "a": "NO ACTION",
    "r": "RESTRICT",
    "c": "CASCADE",
    "n": "SET NULL",
    "d": "SET DEFAULT",
}

# pg_constraint.confmatchtype
MATCH_RULES: Dict[str, str] = {
    "f": "FULL",
    "p": "PARTIAL",
    "s": "SIMPLE",
}


def decode_rule(code: str) -> str:
    """Map an update/delete rule code to its SQL keywords.

    The code must be one PostgreSQL emits; anything else raises KeyError.
    """
    return RULE_ACTIONS[code]


def decode_match_rule(code: str) -> str:
    """Map a match rule code to its SQL keyword (same precondition as decode_rule)."""
    return MATCH_RULES[code]


def list_all_fkeys(
    source: CatalogSource,
    catalog: Catalog,
    including: Optional[Dict[str, List[str]]] = None,
    excluding: Optional[Dict[str, List[str]]] = None,
) -> Catalog:
    """Attach foreign keys whose both endpoints are in the catalog.

    The inclusion filter applies to the referencing and the referenced table;
    the exclusion filter to the referencing table only, so that a key pointing
    at an excluded table reaches the endpoint check and is skipped with a
    NOTICE instead of vanishing inside the query.
    """
    include_sql, include_params = filter_clause(including, "n.nspname", "c.relname")
    exclude_sql, exclude_params = filter_clause(excluding, "n.nspname", "c.relname", negate=True)
    finclude_sql, finclude_params = filter_clause(including, "nf.nspname", "cf.relname")

    query = queries.LIST_FOREIGN_KEYS.format(
        including=include_sql,
        excluding=exclude_sql,
        foreign_including=finclude_sql,
    )
    params = include_params + exclude_params + finclude_params

    count = 0
    dropped = 0
    for row in source.execute(query, params):
        (schema_name, table_name, fschema_name, ftable_name, conname,
         columns, fcolumns, update_code, delete_code, match_code,
         deferrable, deferred, definition) = row

        table = catalog.get_table(schema_name, table_name)
        ftable = catalog.get_table(fschema_name, ftable_name)

        if table is None or ftable is None:
            logger.log(
                NOTICE,
                f"Foreign key {conname} from {schema_name}.{table_name} "
                f"to {fschema_name}.{ftable_name} is ignored: "
                f"its {'referencing' if table is None else 'referenced'} table is not selected",
            )
            dropped += 1
            continue

        table.add_foreign_key(
            ForeignKey(
                name=conname,
                table=table,
                columns=split_names(columns),
                foreign_table=ftable,
                foreign_columns=split_names(fcolumns),
                update_rule=decode_rule(update_code),
                delete_rule=decode_rule(delete_code),
                match_rule=decode_match_rule(match_code),
                deferrable=deferrable,
                initially_deferred=deferred,
                definition=definition,
            )
        )
        count += 1

    logger.debug(f"Found {count} foreign keys, ignored {dropped}")
    return catalog
