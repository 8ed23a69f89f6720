"""
Catalog component - Book catalog transformations.
"""

from ._impl import (
    DEFAULT_CONFIG,
    MISSING_YEAR_POLICIES,
    CatalogConfig,
    describe,
    describe_record,
    extract_field,
    field_value,
    fill_default_year,
    filter_by_year,
    group_by,
    has_author,
    has_field,
    has_value,
    sort_records,
)
from .component import (
    run_describe,
    run_extract,
    run_fill_year,
    run_filter,
    run_group,
    run_has_author,
    run_sort,
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
from .ports import CatalogRulesPort, CatalogSourcePort

__all__ = [
    # Entry points
    "run_extract",
    "run_has_author",
    "run_fill_year",
    "run_filter",
    "run_describe",
    "run_sort",
    "run_group",
    # Input models
    "ExtractFieldInput",
    "HasAuthorInput",
    "FillYearInput",
    "FilterByYearInput",
    "DescribeInput",
    "SortInput",
    "GroupByInput",
    # Output models
    "ValuesOutput",
    "MatchOutput",
    "RecordListOutput",
    "DescribeOutput",
    "GroupByOutput",
    # Ports
    "CatalogRulesPort",
    "CatalogSourcePort",
    # Functional core
    "CatalogConfig",
    "DEFAULT_CONFIG",
    "MISSING_YEAR_POLICIES",
    "describe",
    "describe_record",
    "extract_field",
    "field_value",
    "fill_default_year",
    "filter_by_year",
    "group_by",
    "has_author",
    "has_field",
    "has_value",
    "sort_records",
]
