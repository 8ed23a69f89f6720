from pathlib import Path

import pytest

from catalogkit.adapters.catalog_file import CatalogFileAdapter
from catalogkit.domain.entities import Record

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def sample_catalog_path() -> Path:
    return PROJECT_ROOT / "data" / "books.yaml"


@pytest.fixture
def sample_records(sample_catalog_path: Path) -> list[Record]:
    """The shipped sample catalog, loaded through the file adapter."""
    return CatalogFileAdapter(sample_catalog_path).load()
