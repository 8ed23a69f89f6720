"""
Catalog component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from catalogkit.domain.entities import MissingYearPolicy, Record


class CatalogRulesPort(Protocol):
    """Port for catalog configuration."""

    def get_default_year(self) -> int:
        """Year given to records that have none."""
        ...

    def get_unknown_year_label(self) -> str:
        """Text shown in place of a missing year."""
        ...

    def get_missing_year_policy(self) -> MissingYearPolicy:
        """Where yearless records go when sorting."""
        ...


class CatalogSourcePort(Protocol):
    """Port for reading a catalog from storage."""

    def load(self) -> list[Record]:
        """Load all records in stored order."""
        ...
