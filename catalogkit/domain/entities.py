from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
MissingYearPolicy = Literal["last", "first", "zero"]

UNKNOWN_YEAR_LABEL = "unknown"

# --- Catalog ---

class Record(BaseModel):
    """One catalog item. Immutable; use model_copy(update=...) to derive."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str
    author: str
    year: int | None = Field(default=None)
