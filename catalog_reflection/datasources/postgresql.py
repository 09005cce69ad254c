"""PostgreSQL data source implementation."""

from typing import Any, Dict, List, Optional, Sequence
import logging

import psycopg2

from .base import CatalogSource

logger = logging.getLogger(__name__)


class PostgreSQLDataSource(CatalogSource):
    """PostgreSQL catalog source over a single psycopg2 connection."""

    def __init__(self, name: str, config: Optional[Dict[str, Any]] = None):
        """Initialize PostgreSQL data source.

        Config should include:
            - host: Database host
            - port: Database port (default: 5432)
            - database: Database name
            - user: Username
            - password: Password
            - options: Extra libpq connection keywords (optional)
        """
        super().__init__(name, config)
        self._owns_connection = False

    @classmethod
    def from_connection(cls, name: str, connection) -> "PostgreSQLDataSource":
        """Wrap an already-open psycopg2 connection owned by the caller."""
        datasource = cls(name)
        datasource.connection = connection
        datasource._connected = True
        return datasource

    @property
    def database(self) -> Optional[str]:
        if self.config.get("database"):
            return self.config["database"]
        if self.connection is not None:
            return self.connection.get_dsn_parameters().get("dbname")
        return None

    def connect(self) -> None:
        """Open a read-only connection to PostgreSQL."""
        try:
            logger.info(f"Connecting to PostgreSQL database '{self.config['database']}' at {self.config['host']}")
            self.connection = psycopg2.connect(
                host=self.config["host"],
                port=self.config.get("port", 5432),
                dbname=self.config["database"],
                user=self.config["user"],
                password=self.config.get("password"),
                **self.config.get("options", {}),
            )
            self.connection.set_session(readonly=True, autocommit=True)
            self._owns_connection = True
            self._connected = True
            logger.info(f"Successfully connected to PostgreSQL: {self.name}")
        except psycopg2.Error as e:
            logger.error(f"Failed to connect to PostgreSQL {self.name}: {e}")
            raise ConnectionError(f"PostgreSQL connection failed: {e}") from e

    def disconnect(self) -> None:
        """Close the connection if this data source opened it."""
        if self.connection is not None and self._owns_connection:
            self.connection.close()
            logger.info(f"Disconnected from PostgreSQL: {self.name}")
        self._owns_connection = False
        super().disconnect()

    def execute(self, query: str, params: Optional[Sequence[Any]] = None) -> List[tuple]:
        """Execute a catalog query and fetch every row."""
        if self.connection is None:
            raise RuntimeError(f"Not connected to {self.name}")
        try:
            with self.connection.cursor() as cursor:
                logger.debug(f"Executing query on {self.name}: {' '.join(query.split())[:100]}...")
                cursor.execute(query, params)
                return cursor.fetchall()
        except psycopg2.Error as e:
            logger.error(f"Query execution failed on {self.name}: {e}")
            raise
