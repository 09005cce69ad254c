"""Shared fixtures for catalog reflection tests."""

import pytest

from tests.helpers import RecordingSource, column_row


@pytest.fixture
def source():
    """Recording source with no scripted rows; tests script what they need."""
    return RecordingSource()


@pytest.fixture
def shop_columns():
    """Columns of public.customers and public.orders, in query order."""
    return [
        column_row("public", "customers", 1, "id", not_null=True, oid=100),
        column_row("public", "customers", 2, "name", "character varying", typmod=84, oid=100),
        column_row("public", "orders", 1, "id", not_null=True, oid=200,
                   default="nextval('orders_id_seq'::regclass)"),
        column_row("public", "orders", 2, "customer_id", oid=200),
        column_row("public", "orders", 3, "amount", "numeric", typmod=655366, oid=200),
    ]
