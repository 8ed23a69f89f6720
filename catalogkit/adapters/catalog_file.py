"""
Catalog File Adapter (CatalogSourcePort implementation).

Reads a catalog from a YAML or JSON file. The document is either a
list of book mappings or a mapping with a "books" list:

    books:
      - {title: "1984", author: "Оруэлл", year: 1949}
      - {title: "Преступление и наказание", author: "Достоевский"}

Key behaviors:
- Format chosen by extension (.json, otherwise YAML)
- Entries validated as Records; the first bad entry aborts the load
- Stored order is preserved
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from catalogkit.domain.entities import Record

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})


class CatalogLoadError(ValueError):
    """Raised when a catalog file cannot be read as a list of records."""


def parse_catalog(data: Any) -> list[Record]:
    """Validate decoded catalog data into Records."""
    if isinstance(data, dict):
        data = data.get("books")
    if data is None:
        return []
    if not isinstance(data, list):
        raise CatalogLoadError("Catalog must be a list of books or a mapping with a 'books' list")

    records: list[Record] = []
    for index, entry in enumerate(data):
        try:
            records.append(Record.model_validate(entry))
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid book at index {index}:\n{e}") from e
    return records


class CatalogFileAdapter:
    """Load Records from a catalog file on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _decode(self, content: str) -> Any:
        if self._path.suffix.lower() in JSON_SUFFIXES:
            try:
                return json.loads(content)
            except json.JSONDecodeError as e:
                raise CatalogLoadError(f"Invalid JSON in {self._path}: {e}") from e
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML in {self._path}: {e}") from e

    def load(self) -> list[Record]:
        """
        Load all records in stored order.

        Raises:
            FileNotFoundError: If the file does not exist.
            CatalogLoadError: If the content is not a valid catalog.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Catalog file not found: {self._path}")

        content = self._path.read_text(encoding="utf-8")
        records = parse_catalog(self._decode(content))
        logger.info("Loaded %d records from %s", len(records), self._path)
        return records
