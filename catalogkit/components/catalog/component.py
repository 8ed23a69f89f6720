"""
Catalog component - Book catalog transformations.

Entry points wrap the functional core and resolve defaults from an
optional rules port. Every entry point returns a frozen output model.
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_CONFIG,
    CatalogConfig,
    count_dropped,
    describe,
    extract_field,
    fill_default_year,
    filter_by_year,
    group_by,
    has_author,
    sort_records,
)
from .models import (
    DescribeInput,
    DescribeOutput,
    ExtractFieldInput,
    FillYearInput,
    FilterByYearInput,
    GroupByInput,
    GroupByOutput,
    HasAuthorInput,
    MatchOutput,
    RecordListOutput,
    SortInput,
    ValuesOutput,
)
from .ports import CatalogRulesPort


def _build_config(rules: CatalogRulesPort | None) -> CatalogConfig:
    """Build catalog config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return CatalogConfig(
        default_year=rules.get_default_year(),
        unknown_year_label=rules.get_unknown_year_label(),
        missing_year_policy=rules.get_missing_year_policy(),
    )


# --- Component Entry Points ---


def run_extract(inp: ExtractFieldInput) -> ValuesOutput:
    """Extract one field from every record."""
    values = extract_field(inp.records, inp.field)
    return ValuesOutput(values=tuple(values), total=len(values))


def run_has_author(inp: HasAuthorInput) -> MatchOutput:
    """Check whether the catalog holds a book by the given author."""
    return MatchOutput(found=has_author(inp.records, inp.author))


def run_fill_year(
    inp: FillYearInput,
    *,
    rules: CatalogRulesPort | None = None,
) -> RecordListOutput:
    """Give every yearless record a default year."""
    default_year = inp.default_year
    if default_year is None:
        default_year = _build_config(rules).default_year

    records = fill_default_year(inp.records, default_year)
    return RecordListOutput(records=tuple(records), total=len(records))


def run_filter(inp: FilterByYearInput) -> RecordListOutput:
    """Keep records published after min_year."""
    records = filter_by_year(inp.records, inp.min_year)
    return RecordListOutput(records=tuple(records), total=len(records))


def run_describe(
    inp: DescribeInput,
    *,
    rules: CatalogRulesPort | None = None,
) -> DescribeOutput:
    """Render records as 'Title (Author, Year)' strings."""
    label = inp.unknown_label
    if label is None:
        label = _build_config(rules).unknown_year_label

    return DescribeOutput(lines=tuple(describe(inp.records, label)))


def run_sort(
    inp: SortInput,
    *,
    rules: CatalogRulesPort | None = None,
) -> RecordListOutput:
    """
    Sort records by year, then title.

    Raises:
        ValueError: If the missing-year policy is unknown.
    """
    policy = inp.missing_year
    if policy is None:
        policy = _build_config(rules).missing_year_policy

    records = sort_records(inp.records, policy)
    return RecordListOutput(records=tuple(records), total=len(records))


def run_group(inp: GroupByInput) -> GroupByOutput:
    """Group records or mappings by a field."""
    return GroupByOutput(
        groups=group_by(inp.items, inp.key),
        dropped=count_dropped(inp.items, inp.key),
    )
