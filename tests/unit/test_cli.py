"""
CLI tests.

Runs catalogkit.app_shell.cli.main against temporary catalog and rules
files and checks printed output and exit codes.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from catalogkit.app_shell.cli import main
from catalogkit.components.catalog import MISSING_YEAR_POLICIES
from catalogkit.rules.loader import RULES_PATH_ENV

BOOKS = [
    {"title": "1984", "author": "Оруэлл", "year": 1949},
    {"title": "Мастер и Маргарита", "author": "Булгаков", "year": 1967},
    {"title": "Атлант расправил плечи", "author": "Рэнд", "year": 1957},
    {"title": "Преступление и наказание", "author": "Достоевский"},
    {"title": "Собачье сердце", "author": "Булгаков", "year": 1925},
]


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "books.yaml"
    path.write_text(yaml.dump({"books": BOOKS}, allow_unicode=True), encoding="utf-8")
    return path


@pytest.fixture
def rules_path(tmp_path: Path) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(
        "catalog:\n"
        "  default_year: 2025\n"
        "  unknown_year_label: unknown\n"
        "  missing_year_sort: last\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8",
    )
    return path


def run_cli(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, list[str]]:
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, out.splitlines()


class TestCommands:
    """Test each subcommand."""

    def test_titles(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        code, lines = run_cli(
            capsys, "--catalog", str(catalog_path), "--rules", str(rules_path), "titles"
        )
        assert code == 0
        assert lines[0] == "1984"
        assert len(lines) == 5

    def test_titles_year_field_uses_label(
        self, capsys, catalog_path: Path, rules_path: Path
    ) -> None:
        code, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "titles", "--field", "year",
        )
        assert code == 0
        assert lines == ["1949", "1967", "1957", "unknown", "1925"]

    def test_has_author(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "has-author", "оруэлл",
        )
        assert lines == ["yes"]

        _, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "has-author", "Чехов",
        )
        assert lines == ["no"]

    def test_fill_year(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys, "--catalog", str(catalog_path), "--rules", str(rules_path), "fill-year"
        )
        assert lines[3] == "Преступление и наказание (Достоевский, 2025)"

    def test_fill_year_explicit(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "fill-year", "--year", "1866",
        )
        assert lines[3] == "Преступление и наказание (Достоевский, 1866)"

    def test_filter(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "filter", "--min-year", "1950",
        )
        assert lines == [
            "Мастер и Маргарита (Булгаков, 1967)",
            "Атлант расправил плечи (Рэнд, 1957)",
        ]

    def test_describe(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys, "--catalog", str(catalog_path), "--rules", str(rules_path), "describe"
        )
        assert lines[0] == "1984 (Оруэлл, 1949)"
        assert lines[3] == "Преступление и наказание (Достоевский, unknown)"

    def test_sort_default_policy(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys, "--catalog", str(catalog_path), "--rules", str(rules_path), "sort"
        )
        assert lines[0] == "Собачье сердце (Булгаков, 1925)"
        assert lines[-1] == "Преступление и наказание (Достоевский, unknown)"

    def test_sort_first_policy(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "sort", "--missing-year", "first",
        )
        assert lines[0] == "Преступление и наказание (Достоевский, unknown)"

    def test_group(self, capsys, catalog_path: Path, rules_path: Path) -> None:
        _, lines = run_cli(
            capsys, "--catalog", str(catalog_path), "--rules", str(rules_path), "group"
        )
        assert lines[0] == "Оруэлл:"
        index = lines.index("Булгаков:")
        assert lines[index + 1] == "  - Мастер и Маргарита (Булгаков, 1967)"
        assert lines[index + 2] == "  - Собачье сердце (Булгаков, 1925)"


class TestErrors:
    """Test failure exit codes."""

    def test_missing_catalog(self, capsys, tmp_path: Path, rules_path: Path) -> None:
        code, lines = run_cli(
            capsys, "--catalog", str(tmp_path / "none.yaml"), "--rules", str(rules_path), "describe"
        )
        assert code == 1
        assert lines == []

    def test_invalid_catalog(self, capsys, tmp_path: Path, rules_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("- {title: only}\n", encoding="utf-8")
        code, _ = run_cli(capsys, "--catalog", str(path), "--rules", str(rules_path), "describe")
        assert code == 1

    def test_missing_rules_when_given(self, capsys, catalog_path: Path, tmp_path: Path) -> None:
        code, _ = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(tmp_path / "none.yaml"),
            "describe",
        )
        assert code == 1

    def test_missing_rules_from_env(
        self, capsys, monkeypatch: pytest.MonkeyPatch, catalog_path: Path, tmp_path: Path
    ) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, str(tmp_path / "nope.yaml"))
        code, lines = run_cli(capsys, "--catalog", str(catalog_path), "describe")
        assert code == 1
        assert lines == []

    def test_invalid_rules(self, capsys, catalog_path: Path, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("catalog:\n  missing_year_sort: middle\n", encoding="utf-8")
        code, _ = run_cli(capsys, "--catalog", str(catalog_path), "--rules", str(path), "sort")
        assert code == 1

    def test_unknown_command(self, catalog_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--catalog", str(catalog_path), "shelve"])

    def test_unknown_missing_year_policy(self, catalog_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--catalog", str(catalog_path), "sort", "--missing-year", "middle"])

    @pytest.mark.parametrize("policy", MISSING_YEAR_POLICIES)
    def test_every_policy_accepted(
        self, capsys, catalog_path: Path, rules_path: Path, policy: str
    ) -> None:
        code, lines = run_cli(
            capsys,
            "--catalog", str(catalog_path),
            "--rules", str(rules_path),
            "sort", "--missing-year", policy,
        )
        assert code == 0
        assert len(lines) == 5
