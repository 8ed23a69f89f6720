"""
Catalog component - Data models.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

from catalogkit.domain.entities import MissingYearPolicy, Record

# --- Input Models ---


@dataclass(frozen=True)
class ExtractFieldInput:
    """Input for pulling one field out of every record."""

    records: tuple[Record | Mapping[str, Any], ...]
    field: str = "title"


@dataclass(frozen=True)
class HasAuthorInput:
    """Input for a case-insensitive author lookup."""

    records: tuple[Record, ...]
    author: str


@dataclass(frozen=True)
class FillYearInput:
    """Input for filling in missing years. None means use the configured default."""

    records: tuple[Record, ...]
    default_year: int | None = None


@dataclass(frozen=True)
class FilterByYearInput:
    """Input for keeping records published after min_year."""

    records: tuple[Record, ...]
    min_year: int


@dataclass(frozen=True)
class DescribeInput:
    """Input for rendering records as display strings."""

    records: tuple[Record, ...]
    unknown_label: str | None = None


@dataclass(frozen=True)
class SortInput:
    """Input for sorting records by year and title."""

    records: tuple[Record, ...]
    missing_year: MissingYearPolicy | None = None


@dataclass(frozen=True)
class GroupByInput:
    """Input for bucketing records or mappings by a field."""

    items: tuple[Record | Mapping[str, Any], ...]
    key: str


# --- Output Models ---


@dataclass(frozen=True)
class ValuesOutput:
    """Output from field extraction."""

    values: tuple[Any, ...]
    total: int


@dataclass(frozen=True)
class MatchOutput:
    """Output from an existence check."""

    found: bool


@dataclass(frozen=True)
class RecordListOutput:
    """Output from operations returning records."""

    records: tuple[Record, ...]
    total: int


@dataclass(frozen=True)
class DescribeOutput:
    """Output from describe."""

    lines: tuple[str, ...]


@dataclass(frozen=True)
class GroupByOutput:
    """Output from grouping. dropped counts items lacking the key."""

    groups: dict[Hashable, list[Any]] = field(default_factory=dict)
    dropped: int = 0
