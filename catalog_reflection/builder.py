"""Build a catalog from a live PostgreSQL source."""

from typing import Dict, List, Optional, Union

from .catalog import Catalog
from .datasources.base import CatalogSource
from .errors import AmbiguousOrMissingTarget
from .filters.expression import filter_for_catalog, filter_for_table, filter_from_expression
from .filters.quoting import TableReference, quote
from .introspection import list_all_columns, list_all_fkeys, list_all_indexes, list_table_oids
from .utils.logging import get_contextual_logger

VARIANTS = ("pgdg", "redshift")


def build_catalog(
    source: CatalogSource,
    database_name: Optional[str] = None,
    *,
    table: Optional[Union[str, TableReference]] = None,
    source_catalog: Optional[Catalog] = None,
    including: Optional[Dict[str, List[str]]] = None,
    excluding: Optional[Dict[str, List[str]]] = None,
    with_views: bool = False,
    variant: str = "pgdg",
) -> Catalog:
    """Discover tables, columns, indexes and foreign keys into a new catalog.

    At most one of ``table``, ``source_catalog`` and ``including`` selects
    what to discover; ``excluding`` applies on top of any of them.

    Args:
        source: Open source to query
        database_name: Name recorded on the catalog
        table: Build the catalog of this one table
        source_catalog: Select the tables and views of another catalog
        including: Explicit filter expression
        excluding: Filter expression of objects to leave out
        with_views: Also discover views and their columns
        variant: "pgdg", or "redshift" which has no index or foreign key catalogs

    Returns:
        The new catalog

    Raises:
        AmbiguousOrMissingTarget: If ``table`` was given and the catalog does
            not hold exactly one table
        ValueError: If the selection is inconsistent
    """
    selectors = [arg for arg in (table, source_catalog, including) if arg is not None]
    if len(selectors) > 1:
        raise ValueError("Use only one of table, source_catalog and including")
    if variant not in VARIANTS:
        raise ValueError(f"Unsupported source variant: {variant}")

    log = get_contextual_logger(__name__, {"database": database_name, "variant": variant})

    if table is not None:
        including = filter_for_table(source, table)
    elif source_catalog is not None:
        including = filter_for_catalog(source, source_catalog)
    else:
        including = filter_from_expression(including)

    catalog = Catalog(database_name)
    list_all_columns(source, catalog, "table", including, excluding)
    if with_views:
        list_all_columns(source, catalog, "view", including, excluding)

    if variant == "redshift":
        log.debug("Skipping indexes and foreign keys on Redshift")
    else:
        list_all_indexes(source, catalog, including, excluding)
        list_all_fkeys(source, catalog, including, excluding)

    log.debug(
        f"Catalog {database_name}: {catalog.count_tables()} tables, "
        f"{catalog.count_views()} views, {catalog.count_indexes()} indexes, "
        f"{catalog.count_foreign_keys()} foreign keys"
    )

    if table is not None and catalog.count_tables() != 1:
        raise AmbiguousOrMissingTarget(str(table), catalog.table_names())

    return catalog


def refresh_table_oids(source: CatalogSource, catalog: Catalog) -> Catalog:
    """Fill in the object identifier of tables that have none, in one query."""
    missing = {}
    for table in catalog.tables():
        if table.oid is not None:
            continue
        schema_name = table.schema.effective_target_name() if table.schema else None
        if schema_name:
            name = f"{quote(schema_name)}.{quote(table.name)}"
        else:
            name = quote(table.name)
        missing[name] = table

    oids = list_table_oids(source, list(missing))
    for name, oid in oids.items():
        missing[name].oid = oid
    return catalog
