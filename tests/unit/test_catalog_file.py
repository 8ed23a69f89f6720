"""
Catalog file adapter tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from catalogkit.adapters.catalog_file import CatalogFileAdapter, CatalogLoadError, parse_catalog
from catalogkit.domain.entities import Record


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent.parent


class TestParseCatalog:
    """Test validation of decoded catalog data."""

    def test_list_of_books(self) -> None:
        records = parse_catalog(
            [{"title": "A", "author": "B", "year": 2000}, {"title": "C", "author": "D"}]
        )
        assert records == [
            Record(title="A", author="B", year=2000),
            Record(title="C", author="D"),
        ]

    def test_books_key(self) -> None:
        records = parse_catalog({"books": [{"title": "A", "author": "B"}]})
        assert records[0].year is None

    def test_empty(self) -> None:
        assert parse_catalog(None) == []
        assert parse_catalog({}) == []

    def test_numeric_title_coerced(self) -> None:
        """Unquoted YAML titles like 1984 load as text."""
        assert parse_catalog([{"title": 1984, "author": "Оруэлл"}])[0].title == "1984"

    def test_not_a_list(self) -> None:
        with pytest.raises(CatalogLoadError):
            parse_catalog("books")

    def test_bad_entry_names_index(self) -> None:
        with pytest.raises(CatalogLoadError, match="index 1"):
            parse_catalog([{"title": "A", "author": "B"}, {"title": "No author"}])


class TestCatalogFileAdapter:
    """Test file loading."""

    def test_load_sample_catalog(self, project_root: Path) -> None:
        records = CatalogFileAdapter(project_root / "data" / "books.yaml").load()
        assert len(records) == 5
        assert records[0].title == "1984"
        assert records[3].year is None

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "books.json"
        path.write_text(
            json.dumps([{"title": "Мастер и Маргарита", "author": "Булгаков", "year": 1967}]),
            encoding="utf-8",
        )
        records = CatalogFileAdapter(path).load()
        assert records == [Record(title="Мастер и Маргарита", author="Булгаков", year=1967)]

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "books.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="Invalid JSON"):
            CatalogFileAdapter(path).load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "books.yaml"
        path.write_text("books: [unclosed", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="Invalid YAML"):
            CatalogFileAdapter(path).load()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            CatalogFileAdapter(tmp_path / "absent.yaml").load()
