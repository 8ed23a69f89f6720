"""
Catalog helpers - pure transformations over a sequence of Records.

Functional Core - no I/O, no logging, no shared state.

Field access works for both Record models and plain mappings. A field
counts as absent when the key is missing or its value is None, so a
record without a year and a mapping with "year": None behave the same.

Invariants:
- I1: Inputs are never mutated; every function returns a new list
- I2: Order is preserved unless the function is a sort or a grouping
- I3: Absence is signalled by exclusion or a sentinel, never an exception
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from catalogkit.domain.entities import UNKNOWN_YEAR_LABEL, MissingYearPolicy, Record

MISSING_YEAR_POLICIES: tuple[MissingYearPolicy, ...] = ("last", "first", "zero")

_ABSENT = object()


# --- Configuration ---


@dataclass(frozen=True)
class CatalogConfig:
    """Catalog behaviour knobs."""

    default_year: int = 2025
    unknown_year_label: str = UNKNOWN_YEAR_LABEL
    missing_year_policy: MissingYearPolicy = "last"


DEFAULT_CONFIG = CatalogConfig()


# --- Field Access ---


def field_value(item: Record | Mapping[str, Any], name: str, default: Any = _ABSENT) -> Any:
    """
    Read a field from a Record or a mapping.

    Only declared model fields count on a Record; methods and other
    attributes are treated as missing. Without a default, a missing field
    raises like plain attribute or key access would. With a default,
    missing and None both yield it.
    """
    if isinstance(item, Mapping):
        if default is _ABSENT:
            return item[name]
        value = item.get(name)
    elif name not in type(item).model_fields:
        if default is _ABSENT:
            raise AttributeError(f"{type(item).__name__} has no field {name!r}")
        return default
    else:
        value = getattr(item, name)
        if default is _ABSENT:
            return value

    return default if value is None else value


def has_field(item: Record | Mapping[str, Any], name: str) -> bool:
    """True when the field exists and is not None."""
    return field_value(item, name, None) is not None


# --- Operations ---


def extract_field(
    items: Iterable[Record | Mapping[str, Any]], name: str = "title"
) -> list[Any]:
    """Values of one field, one per item, in input order."""
    return [field_value(item, name) for item in items]


def has_value(
    items: Iterable[Record | Mapping[str, Any]], name: str, value: str
) -> bool:
    """Case-insensitive equality match of a text field against value."""
    needle = value.casefold()
    for item in items:
        stored = field_value(item, name, None)
        if isinstance(stored, str) and stored.casefold() == needle:
            return True
    return False


def has_author(records: Iterable[Record | Mapping[str, Any]], author: str) -> bool:
    """Check whether any record was written by author, ignoring case."""
    return has_value(records, "author", author)


def fill_default_year(records: Iterable[Record], default_year: int) -> list[Record]:
    """Copy of records where every record without a year gets default_year."""
    return [
        record if record.year is not None else record.model_copy(update={"year": default_year})
        for record in records
    ]


def filter_by_year(records: Iterable[Record], min_year: int) -> list[Record]:
    """Records with a year strictly greater than min_year. Yearless records are dropped."""
    return [record for record in records if record.year is not None and record.year > min_year]


def describe_record(record: Record, unknown_label: str = UNKNOWN_YEAR_LABEL) -> str:
    year = unknown_label if record.year is None else str(record.year)
    return f"{record.title} ({record.author}, {year})"


def describe(
    records: Iterable[Record], unknown_label: str = UNKNOWN_YEAR_LABEL
) -> list[str]:
    """Display strings of the form 'Title (Author, Year)'."""
    return [describe_record(record, unknown_label) for record in records]


def _sort_key(record: Record, policy: MissingYearPolicy) -> tuple[int, int, str]:
    # Leading rank places yearless records before or after all dated ones.
    if record.year is None:
        if policy == "last":
            return (1, 0, record.title)
        if policy == "first":
            return (-1, 0, record.title)
        return (0, 0, record.title)
    return (0, record.year, record.title)


def sort_records(
    records: Iterable[Record], missing_year: MissingYearPolicy = "last"
) -> list[Record]:
    """
    Sort by year ascending, then by title.

    Titles compare by code point, which matches byte-wise UTF-8 order.
    The sort is stable, so fully equal keys keep their input order.

    Args:
        records: Records to sort.
        missing_year: Where yearless records go: "last" (after every
            year), "first" (before every year) or "zero" (as year 0).

    Raises:
        ValueError: If missing_year is not a known policy.
    """
    if missing_year not in MISSING_YEAR_POLICIES:
        raise ValueError(
            f"Unknown missing-year policy {missing_year!r}; "
            f"expected one of {', '.join(MISSING_YEAR_POLICIES)}"
        )
    return sorted(records, key=lambda record: _sort_key(record, missing_year))


def group_by(
    items: Iterable[Record | Mapping[str, Any]], key: str
) -> dict[Hashable, list[Any]]:
    """
    Bucket items by the value of one field.

    Buckets appear in first-seen order and keep insertion order inside.
    Items without the field are left out of the result.
    """
    groups: dict[Hashable, list[Any]] = {}
    for item in items:
        value = field_value(item, key, None)
        if value is None:
            continue
        groups.setdefault(value, []).append(item)
    return groups


def count_dropped(items: Sequence[Record | Mapping[str, Any]], key: str) -> int:
    """Number of items group_by would leave out for key."""
    return sum(1 for item in items if not has_field(item, key))
