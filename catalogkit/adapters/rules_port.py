"""
Rules-backed adapter for the catalog component's CatalogRulesPort.
"""

from __future__ import annotations

from catalogkit.domain.entities import MissingYearPolicy
from catalogkit.rules.models import CatalogRules


class RulesCatalogAdapter:
    """Expose the catalog section of CatalogRules through CatalogRulesPort."""

    def __init__(self, rules: CatalogRules) -> None:
        self._catalog = rules.catalog

    def get_default_year(self) -> int:
        return self._catalog.default_year

    def get_unknown_year_label(self) -> str:
        return self._catalog.unknown_year_label

    def get_missing_year_policy(self) -> MissingYearPolicy:
        return self._catalog.missing_year_sort
