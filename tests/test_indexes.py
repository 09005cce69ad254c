"""Tests for the index discovery pass."""

import pytest

from catalog_reflection.errors import InternalConsistencyError
from catalog_reflection.introspection.columns import list_all_columns
from catalog_reflection.introspection.indexes import list_all_indexes, split_names
from catalog_reflection.catalog import Catalog
from tests.helpers import index_row


@pytest.fixture
def shop_catalog(source, shop_columns):
    source.script(shop_columns)
    return list_all_columns(source, Catalog("shop"))


def test_attaches_indexes_to_tables(source, shop_catalog):
    source.script([
        index_row("public", "customers", "customers_pkey", primary=True, unique=True,
                  constraint_name="customers_pkey",
                  constraint_definition="PRIMARY KEY (id)"),
        index_row("public", "orders", "orders_customer_idx", columns="customer_id,id",
                  predicate="(amount > (0)::numeric)"),
    ])

    list_all_indexes(source, shop_catalog)

    customers = shop_catalog.get_table("public", "customers")
    pkey = customers.indexes["customers_pkey"]
    assert pkey.primary and pkey.unique
    assert pkey.constraint_name == "customers_pkey"
    assert pkey.constraint_definition == "PRIMARY KEY (id)"
    assert pkey.schema is shop_catalog.get_schema("public")
    assert pkey.table is customers

    orders_idx = shop_catalog.get_table("public", "orders").indexes["orders_customer_idx"]
    assert orders_idx.columns == ["customer_id", "id"]
    assert orders_idx.predicate == "(amount > (0)::numeric)"
    assert orders_idx.constraint_name is None
    assert shop_catalog.count_indexes() == 2


def test_filters_apply_to_the_indexed_table(source, shop_catalog):
    source.script([])

    list_all_indexes(source, shop_catalog, including={"public": ["^orders$"]},
                     excluding={"public": ["^customers$"]})

    query, params = source.captured[-1]
    assert "AND ((rn.nspname = %s AND r.relname ~ %s))" in query
    assert "AND NOT ((rn.nspname = %s AND r.relname ~ %s))" in query
    assert params == ["public", "^orders$", "public", "^customers$"]


def test_unknown_schema_is_an_internal_error(source, shop_catalog):
    source.script([index_row("audit", "events", "events_pkey")])

    with pytest.raises(InternalConsistencyError, match="audit"):
        list_all_indexes(source, shop_catalog)


def test_unknown_table_is_an_internal_error(source, shop_catalog):
    source.script([index_row("public", "payments", "payments_pkey")])

    with pytest.raises(InternalConsistencyError, match="public.payments"):
        list_all_indexes(source, shop_catalog)


def test_split_names():
    assert split_names("a,b,c") == ["a", "b", "c"]
    assert split_names(None) == []
    assert split_names("") == []
