"""Compile filter expressions into SQL predicates.

Regex matching is pushed down to the source with PostgreSQL's ``~``
operator; schema names and patterns are always bound as parameters.
"""

from typing import Any, Dict, List, Optional, Tuple


def compile_filter(
    expression: Optional[Dict[str, List[str]]],
    schema_column: str,
    name_column: str,
) -> Tuple[List[str], List[Any]]:
    """Compile one predicate per (schema, pattern) pair.

    Args:
        expression: Mapping of schema name to patterns
        schema_column: SQL expression holding the schema name
        name_column: SQL expression holding the object name

    Returns:
        Tuple of (predicates, params), params in placeholder order
    """
    predicates: List[str] = []
    params: List[Any] = []
    if not expression:
        return predicates, params

    for schema_name, patterns in expression.items():
        for pattern in patterns:
            predicates.append(f"({schema_column} = %s AND {name_column} ~ %s)")
            params.append(schema_name)
            params.append(pattern)
    return predicates, params


def filter_clause(
    expression: Optional[Dict[str, List[str]]],
    schema_column: str,
    name_column: str,
    negate: bool = False,
) -> Tuple[str, List[Any]]:
    """Build an ``AND`` clause from a filter expression.

    The predicates are OR'ed together: any matching pair selects the object.
    With ``negate`` the whole disjunction is negated, so an object matching
    any pair is left out.

    Returns:
        Tuple of (clause, params); the clause is empty when there is nothing to filter
    """
    predicates, params = compile_filter(expression, schema_column, name_column)
    if not predicates:
        return "", []

    disjunction = " OR ".join(predicates)
    if negate:
        return f"AND NOT ({disjunction})", params
    return f"AND ({disjunction})", params
