"""Base data source interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence


class CatalogSource(ABC):
    """Abstract base class for sources the catalog builder reads from.

    Implementations run read-only, ``%s``-parametrized queries and return
    every row as a tuple, with SQL NULL decoded as None. Driver errors are
    raised unchanged.
    """

    def __init__(self, name: str, config: Optional[Dict[str, Any]] = None):
        """Initialize data source.

        Args:
            name: Unique name for this data source
            config: Configuration dictionary
        """
        self.name = name
        self.config = config or {}
        self.connection = None
        self._connected = False

    @abstractmethod
    def execute(self, query: str, params: Optional[Sequence[Any]] = None) -> List[tuple]:
        """Run a query and fetch all of its rows.

        Args:
            query: SQL query string with ``%s`` placeholders
            params: Values bound to the placeholders, in order

        Returns:
            Rows as tuples, in the order the source returned them
        """
        pass

    def connect(self) -> None:
        """Establish connection to the data source."""
        raise NotImplementedError(f"{self.__class__.__name__} cannot open connections")

    def disconnect(self) -> None:
        """Close connection to the data source."""
        self.connection = None
        self._connected = False

    def is_connected(self) -> bool:
        """Check if data source is connected.

        Returns:
            True if connected, False otherwise
        """
        return self._connected

    def ensure_connected(self) -> None:
        """Ensure data source is connected.

        Raises:
            ConnectionError: If connection cannot be established
        """
        if not self.is_connected():
            self.connect()

    def __enter__(self):
        """Context manager entry."""
        self.ensure_connected()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
