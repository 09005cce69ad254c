"""Exceptions raised while building a catalog."""

from typing import List


class CatalogError(Exception):
    """Base class for catalog construction failures."""


class AmbiguousOrMissingTarget(CatalogError):
    """A single table was requested but the catalog holds zero or several."""

    def __init__(self, target: str, matches: List[str]):
        self.target = target
        self.matches = list(matches)
        if self.matches:
            found = ", ".join(self.matches)
            message = (
                f"Expected exactly one table matching '{target}', "
                f"found {len(self.matches)}: {found}"
            )
        else:
            message = f"No table found matching '{target}'"
        super().__init__(message)


class InternalConsistencyError(CatalogError):
    """A catalog row refers to a schema or table no earlier pass registered."""
