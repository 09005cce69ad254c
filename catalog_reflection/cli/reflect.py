"""Command line entry point for catalog reflection."""

from __future__ import annotations

from typing import Optional

import click

from ..builder import build_catalog
from ..catalog import Catalog, Table
from ..config import Config, load_config
from ..datasources.postgresql import PostgreSQLDataSource
from ..errors import CatalogError
from ..introspection import list_schemas
from ..utils.logging import setup_logging


class CatalogPrinter:
    """Prints catalog metadata in a readable format."""

    def __init__(self, emit):
        self.emit = emit

    def display_catalog(self, catalog: Catalog) -> None:
        if not catalog.schemas:
            self.emit("Catalog is empty.")
            return
        self.emit(f"\nCatalog: {catalog.name}")
        self.emit("=" * 80)
        for schema in catalog.schemas.values():
            self._print_schema(schema)
        self.emit(
            f"\n{catalog.count_tables()} tables, {catalog.count_views()} views, "
            f"{catalog.count_indexes()} indexes, {catalog.count_foreign_keys()} foreign keys"
        )

    def _print_schema(self, schema) -> None:
        header = f"\nSchema: {schema.name}"
        self.emit(header)
        self.emit("-" * len(header))
        for table in schema.tables.values():
            self.emit(f"\nTable: {table.qualified_name()}")
            self._print_columns(table)
            self._print_indexes(table)
            self._print_foreign_keys(table)
        for view in schema.views.values():
            self.emit(f"\nView: {view.qualified_name()}")
            self._print_columns(view)

    def _print_columns(self, table: Table) -> None:
        self.emit("  Columns:")
        for column in table.columns:
            nullable = "NULL" if column.nullable else "NOT NULL"
            default = f" DEFAULT {column.default}" if column.default is not None else ""
            self.emit(f"    - {column.name}: {column.type_name} {nullable}{default}")

    def _print_indexes(self, table: Table) -> None:
        if not table.indexes:
            return
        self.emit("  Indexes:")
        for index in table.indexes.values():
            self.emit(f"    - {index.definition}")

    def _print_foreign_keys(self, table: Table) -> None:
        if not table.foreign_keys:
            return
        self.emit("  Foreign keys:")
        for fkey in table.foreign_keys.values():
            self.emit(f"    - {fkey.name}: {fkey.definition}")


def _create_datasource(config: Config) -> PostgreSQLDataSource:
    ds_config = config.datasource
    return PostgreSQLDataSource(ds_config.name, ds_config.as_dict())


def _prepare(config_path: str) -> Config:
    try:
        config = load_config(config_path)
    except ValueError as exc:
        raise click.ClickException(f"invalid config: {exc}") from exc
    setup_logging(
        level=config.logging.level,
        structured=config.logging.structured,
        log_file=config.logging.log_file,
    )
    return config


@click.group()
def cli() -> None:
    """Discover the catalog of a PostgreSQL database."""


@cli.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, readable=True),
    help="Path to YAML config file.",
)
@click.option("--table", "table", default=None, help="Build the catalog of this table only.")
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as JSON.")
def inspect(config_path: str, table: Optional[str], as_json: bool) -> None:
    """Build and print the catalog selected by the configuration."""
    config = _prepare(config_path)
    selection = config.selection
    target = table or selection.table
    including = None if target else selection.including

    with _create_datasource(config) as datasource:
        try:
            catalog = build_catalog(
                datasource,
                config.datasource.database,
                table=target,
                including=including,
                excluding=selection.excluding,
                with_views=selection.with_views,
                variant=selection.variant,
            )
        except (CatalogError, ValueError) as exc:
            raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(catalog.to_json())
    else:
        CatalogPrinter(click.echo).display_catalog(catalog)


@cli.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, readable=True),
    help="Path to YAML config file.",
)
def schemas(config_path: str) -> None:
    """List the user schemas of the source database."""
    config = _prepare(config_path)
    with _create_datasource(config) as datasource:
        for name in list_schemas(datasource):
            click.echo(name)


if __name__ == "__main__":
    cli()
