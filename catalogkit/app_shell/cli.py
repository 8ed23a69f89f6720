import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from catalogkit.adapters.catalog_file import CatalogFileAdapter, CatalogLoadError
from catalogkit.adapters.rules_port import RulesCatalogAdapter
from catalogkit.components.catalog import (
    MISSING_YEAR_POLICIES,
    DescribeInput,
    ExtractFieldInput,
    FillYearInput,
    FilterByYearInput,
    GroupByInput,
    HasAuthorInput,
    SortInput,
    describe_record,
    run_describe,
    run_extract,
    run_fill_year,
    run_filter,
    run_group,
    run_has_author,
    run_sort,
)
from catalogkit.domain.entities import Record
from catalogkit.rules.loader import RulesError, load_rules
from catalogkit.rules.models import CatalogRules

logger = logging.getLogger("cli")


def configure_logging(rules: CatalogRules) -> None:
    logging.basicConfig(level=rules.logging.level, format=rules.logging.format)


def print_records(records: Sequence[Record], rules: RulesCatalogAdapter) -> None:
    label = rules.get_unknown_year_label()
    for record in records:
        print(describe_record(record, label))


def handle_titles(
    records: tuple[Record, ...], args: argparse.Namespace, rules: RulesCatalogAdapter
) -> None:
    result = run_extract(ExtractFieldInput(records=records, field=args.field))
    for value in result.values:
        print(rules.get_unknown_year_label() if value is None else value)


def handle_has_author(records: tuple[Record, ...], args: argparse.Namespace) -> None:
    result = run_has_author(HasAuthorInput(records=records, author=args.author))
    print("yes" if result.found else "no")


def handle_fill_year(
    records: tuple[Record, ...], args: argparse.Namespace, rules: RulesCatalogAdapter
) -> None:
    result = run_fill_year(FillYearInput(records=records, default_year=args.year), rules=rules)
    print_records(result.records, rules)


def handle_filter(
    records: tuple[Record, ...], args: argparse.Namespace, rules: RulesCatalogAdapter
) -> None:
    result = run_filter(FilterByYearInput(records=records, min_year=args.min_year))
    print_records(result.records, rules)


def handle_describe(records: tuple[Record, ...], rules: RulesCatalogAdapter) -> None:
    result = run_describe(DescribeInput(records=records), rules=rules)
    for line in result.lines:
        print(line)


def handle_sort(
    records: tuple[Record, ...], args: argparse.Namespace, rules: RulesCatalogAdapter
) -> None:
    result = run_sort(SortInput(records=records, missing_year=args.missing_year), rules=rules)
    print_records(result.records, rules)


def handle_group(
    records: tuple[Record, ...], args: argparse.Namespace, rules: RulesCatalogAdapter
) -> None:
    result = run_group(GroupByInput(items=records, key=args.key))
    for value, bucket in result.groups.items():
        print(f"{value}:")
        for record in bucket:
            print(f"  - {describe_record(record, rules.get_unknown_year_label())}")
    if result.dropped:
        logger.info("Skipped %d records without '%s'", result.dropped, args.key)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Book catalog helpers")
    parser.add_argument("--catalog", required=True, help="Path to a YAML or JSON catalog file")
    parser.add_argument("--rules", help="Path to rules YAML (default: catalogkit_rules.yaml)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # titles
    titles_parser = subparsers.add_parser("titles", help="List one field of every book")
    titles_parser.add_argument(
        "--field", default="title", choices=["title", "author", "year"], help="Field to list"
    )

    # has-author
    author_parser = subparsers.add_parser("has-author", help="Check for a book by an author")
    author_parser.add_argument("author", help="Author name, any casing")

    # fill-year
    fill_parser = subparsers.add_parser("fill-year", help="Give yearless books a default year")
    fill_parser.add_argument("--year", type=int, help="Default year (from rules if omitted)")

    # filter
    filter_parser = subparsers.add_parser("filter", help="Books published after a year")
    filter_parser.add_argument("--min-year", type=int, required=True, help="Exclusive lower bound")

    # describe
    subparsers.add_parser("describe", help="Print 'Title (Author, Year)' lines")

    # sort
    sort_parser = subparsers.add_parser("sort", help="Sort by year, then title")
    sort_parser.add_argument(
        "--missing-year",
        choices=MISSING_YEAR_POLICIES,
        help="Placement of yearless books (from rules if omitted)",
    )

    # group
    group_parser = subparsers.add_parser("group", help="Group books by a field")
    group_parser.add_argument("--key", default="author", help="Field to group by")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        rules = load_rules(args.rules, required=args.rules is not None)
    except (FileNotFoundError, RulesError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Could not load rules: %s", e)
        return 1

    configure_logging(rules)
    port = RulesCatalogAdapter(rules)

    try:
        records = tuple(CatalogFileAdapter(Path(args.catalog)).load())
    except (FileNotFoundError, CatalogLoadError) as e:
        logger.error("Could not load catalog: %s", e)
        return 1

    if args.command == "titles":
        handle_titles(records, args, port)
    elif args.command == "has-author":
        handle_has_author(records, args)
    elif args.command == "fill-year":
        handle_fill_year(records, args, port)
    elif args.command == "filter":
        handle_filter(records, args, port)
    elif args.command == "describe":
        handle_describe(records, port)
    elif args.command == "sort":
        handle_sort(records, args, port)
    elif args.command == "group":
        handle_group(records, args, port)

    return 0


if __name__ == "__main__":
    sys.exit(main())
