from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from catalogkit.domain.entities import UNKNOWN_YEAR_LABEL, MissingYearPolicy

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CatalogSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_year: int = 2025
    unknown_year_label: str = Field(default=UNKNOWN_YEAR_LABEL, min_length=1)
    missing_year_sort: MissingYearPolicy = "last"


class LoggingSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CatalogRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    schema_version: Literal[1] = 1
    catalog: CatalogSection = Field(default_factory=CatalogSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)
