"""
Integration tests: sample catalog through rules, adapters and components.
"""

from __future__ import annotations

from pathlib import Path

from catalogkit.adapters.rules_port import RulesCatalogAdapter
from catalogkit.components.catalog import (
    DescribeInput,
    FillYearInput,
    FilterByYearInput,
    SortInput,
    run_describe,
    run_fill_year,
    run_filter,
    run_sort,
)
from catalogkit.domain.entities import Record
from catalogkit.rules.loader import parse_rules

PROJECT_ROOT = Path(__file__).parent.parent.parent


def test_shipped_rules_drive_components(sample_records: list[Record]) -> None:
    rules = RulesCatalogAdapter(
        parse_rules((PROJECT_ROOT / "catalogkit_rules.yaml").read_text(encoding="utf-8"))
    )
    records = tuple(sample_records)

    described = run_describe(DescribeInput(records=records), rules=rules)
    assert described.lines[3] == "Преступление и наказание (Достоевский, unknown)"

    ordered = run_sort(SortInput(records=records), rules=rules)
    assert ordered.records[-1].year is None


def test_fill_then_filter_includes_defaulted(sample_records: list[Record]) -> None:
    """After filling, a defaulted year takes part in threshold filtering."""
    rules = RulesCatalogAdapter(parse_rules("catalog:\n  default_year: 2000\n"))
    filled = run_fill_year(FillYearInput(records=tuple(sample_records)), rules=rules)
    recent = run_filter(FilterByYearInput(records=filled.records, min_year=1960))
    assert [r.title for r in recent.records] == [
        "Мастер и Маргарита",
        "Преступление и наказание",
    ]


def test_filter_without_fill_excludes_yearless(sample_records: list[Record]) -> None:
    recent = run_filter(FilterByYearInput(records=tuple(sample_records), min_year=1960))
    assert [r.title for r in recent.records] == ["Мастер и Маргарита"]


def test_sort_after_fill_places_defaulted_by_year(sample_records: list[Record]) -> None:
    rules = RulesCatalogAdapter(parse_rules("catalog:\n  default_year: 1930\n"))
    filled = run_fill_year(FillYearInput(records=tuple(sample_records)), rules=rules)
    ordered = run_sort(SortInput(records=filled.records), rules=rules)
    assert [r.year for r in ordered.records] == [1925, 1930, 1949, 1957, 1967]
