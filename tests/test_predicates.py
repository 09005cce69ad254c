"""Tests for filter expression compilation."""

from catalog_reflection.filters.predicates import compile_filter, filter_clause


def test_compile_one_predicate_per_pattern():
    expression = {"public": ["^orders$", "^customers$"], "billing": ["^invoices$"]}

    predicates, params = compile_filter(expression, "n.nspname", "c.relname")

    assert predicates == [
        "(n.nspname = %s AND c.relname ~ %s)",
        "(n.nspname = %s AND c.relname ~ %s)",
        "(n.nspname = %s AND c.relname ~ %s)",
    ]
    assert params == [
        "public", "^orders$",
        "public", "^customers$",
        "billing", "^invoices$",
    ]


def test_compile_empty_expression():
    assert compile_filter(None, "n.nspname", "c.relname") == ([], [])
    assert compile_filter({}, "n.nspname", "c.relname") == ([], [])


def test_including_clause_is_a_disjunction():
    clause, params = filter_clause({"public": ["^a$", "^b$"]}, "n.nspname", "c.relname")

    assert clause == (
        "AND ((n.nspname = %s AND c.relname ~ %s) OR (n.nspname = %s AND c.relname ~ %s))"
    )
    assert params == ["public", "^a$", "public", "^b$"]


def test_excluding_clause_negates_the_whole_disjunction():
    clause, params = filter_clause({"public": ["^tmp_"]}, "rn.nspname", "r.relname", negate=True)

    assert clause == "AND NOT ((rn.nspname = %s AND r.relname ~ %s))"
    assert params == ["public", "^tmp_"]


def test_no_clause_without_patterns():
    assert filter_clause(None, "n.nspname", "c.relname", negate=True) == ("", [])
    assert filter_clause({"public": []}, "n.nspname", "c.relname") == ("", [])


def test_patterns_are_never_inlined():
    clause, _ = filter_clause({"public": ["^it's$"]}, "n.nspname", "c.relname")
    assert "it's" not in clause
