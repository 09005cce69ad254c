"""Tests for the psycopg2-backed data source."""

from unittest import mock

import psycopg2
import pytest

from catalog_reflection.datasources.postgresql import PostgreSQLDataSource


def _connection_returning(rows):
    connection = mock.MagicMock()
    cursor = connection.cursor.return_value.__enter__.return_value
    cursor.fetchall.return_value = rows
    return connection, cursor


def test_execute_binds_params_and_fetches_rows():
    connection, cursor = _connection_returning([("public",), ("sales",)])
    datasource = PostgreSQLDataSource.from_connection("src", connection)

    rows = datasource.execute("SELECT nspname FROM pg_namespace WHERE nspname ~ %s", ["^s"])

    assert rows == [("public",), ("sales",)]
    cursor.execute.assert_called_once_with(
        "SELECT nspname FROM pg_namespace WHERE nspname ~ %s", ["^s"]
    )


def test_driver_errors_propagate_unchanged():
    connection, cursor = _connection_returning([])
    cursor.execute.side_effect = psycopg2.OperationalError("server closed the connection")
    datasource = PostgreSQLDataSource.from_connection("src", connection)

    with pytest.raises(psycopg2.OperationalError):
        datasource.execute("SELECT 1")


def test_execute_requires_connection():
    datasource = PostgreSQLDataSource("src", {"database": "shop"})

    with pytest.raises(RuntimeError):
        datasource.execute("SELECT 1")


def test_wrapped_connection_is_not_closed():
    connection, _ = _connection_returning([])
    datasource = PostgreSQLDataSource.from_connection("src", connection)

    datasource.disconnect()

    connection.close.assert_not_called()
    assert not datasource.is_connected()


def test_connect_opens_read_only_session():
    config = {"host": "localhost", "database": "shop", "user": "reader", "password": "pw",
              "options": {"sslmode": "disable"}}
    with mock.patch("catalog_reflection.datasources.postgresql.psycopg2.connect") as connect:
        with PostgreSQLDataSource("src", config) as datasource:
            assert datasource.is_connected()
            assert datasource.database == "shop"

    connect.assert_called_once_with(
        host="localhost", port=5432, dbname="shop", user="reader", password="pw",
        sslmode="disable",
    )
    connection = connect.return_value
    connection.set_session.assert_called_once_with(readonly=True, autocommit=True)
    connection.close.assert_called_once()


def test_connect_failure_becomes_connection_error():
    config = {"host": "localhost", "database": "shop", "user": "reader"}
    with mock.patch(
        "catalog_reflection.datasources.postgresql.psycopg2.connect",
        side_effect=psycopg2.OperationalError("refused"),
    ):
        with pytest.raises(ConnectionError):
            PostgreSQLDataSource("src", config).connect()
