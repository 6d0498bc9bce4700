"""Exceptions raised by MaxDefense modules."""

from __future__ import annotations


class MaxDefenseError(Exception):
    """Base class for MaxDefense failures."""


class ArmorDatabaseError(MaxDefenseError):
    """The armor database could not be opened or is malformed."""


class CatalogTooLargeError(MaxDefenseError, ValueError):
    """Catalog has too many items for exhaustive subset enumeration."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            f"Exhaustive search needs fewer than {limit} items; got {size}. "
            "Filter the catalog before optimizing."
        )
