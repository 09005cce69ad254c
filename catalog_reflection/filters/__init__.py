"""Selection filters for catalog discovery."""

from .quoting import is_quoted, unquote, fold_identifier, quote, parse_table_reference, TableReference
from .predicates import compile_filter, filter_clause
from .expression import (
    FilterExpression,
    anchored_pattern,
    filter_for_table,
    filter_for_catalog,
    filter_from_expression,
)

__all__ = [
    "is_quoted",
    "unquote",
    "fold_identifier",
    "quote",
    "parse_table_reference",
    "TableReference",
    "compile_filter",
    "filter_clause",
    "FilterExpression",
    "anchored_pattern",
    "filter_for_table",
    "filter_for_catalog",
    "filter_from_expression",
]
