"""Identifier quoting helpers.

Source catalogs store names without their quotes, so user-supplied
identifiers are unquoted before being compared with catalog names.
"""

from dataclasses import dataclass
from typing import Optional

from sqlglot import exp
from sqlglot.errors import ParseError

QUOTE_CHARACTERS = ('"', "`")


def is_quoted(identifier: str) -> bool:
    """Return True when the identifier is wrapped in a recognized quote character."""
    if identifier is None or len(identifier) < 2:
        return False
    first = identifier[0]
    return first in QUOTE_CHARACTERS and identifier[-1] == first


def unquote(identifier: str) -> str:
    """Strip the surrounding quote characters of a quoted identifier."""
    if is_quoted(identifier):
        return identifier[1:-1]
    return identifier


def fold_identifier(identifier: str) -> str:
    """Return the catalog spelling of a user identifier.

    Unquoted identifiers fold to lower case, quoted ones keep their case
    and lose their quotes (doubled quote characters collapse to one).
    """
    if is_quoted(identifier):
        quote_char = identifier[0]
        return unquote(identifier).replace(quote_char * 2, quote_char)
    return identifier.lower()


def quote(identifier: str) -> str:
    """Wrap an identifier in double quotes, doubling embedded quotes."""
    escaped = identifier.replace('"', '""')
    return f'"{escaped}"'


@dataclass(frozen=True)
class TableReference:
    """A user-supplied table name, optionally schema-qualified.

    Both parts keep the quoting the user wrote.
    """

    name: str
    schema: Optional[str] = None

    def sql(self) -> str:
        if self.schema:
            return f"{self.schema}.{self.name}"
        return self.name

    def __str__(self) -> str:
        return self.sql()


def _identifier_text(identifier: exp.Identifier) -> str:
    if identifier.quoted:
        return quote(identifier.this)
    return identifier.this


def parse_table_reference(reference: str) -> TableReference:
    """Split ``schema.table`` (either part may be quoted) into its parts.

    Raises:
        ValueError: If the reference is not a valid table name
    """
    try:
        table = exp.to_table(reference, dialect="postgres")
    except ParseError as e:
        raise ValueError(f"Invalid table reference '{reference}': {e}") from e

    if table is None or not isinstance(table.this, exp.Identifier):
        raise ValueError(f"Invalid table reference '{reference}'")

    schema = table.args.get("db")
    return TableReference(
        name=_identifier_text(table.this),
        schema=_identifier_text(schema) if schema is not None else None,
    )
