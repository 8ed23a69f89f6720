"""
Numeric component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Errors ---


@dataclass(frozen=True)
class NumericValidationError:
    """Numeric input error."""

    code: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class FactorialInput:
    """Input for a memoized factorial."""

    n: int


@dataclass(frozen=True)
class FormatPhoneInput:
    """Input for phone number formatting."""

    phone: str


# --- Output Models ---


@dataclass(frozen=True)
class FactorialOutput:
    """Output from factorial. from_cache is True on a cache hit."""

    value: int | None
    from_cache: bool = False
    errors: tuple[NumericValidationError, ...] = field(default_factory=tuple)
    success: bool = True


@dataclass(frozen=True)
class FormatPhoneOutput:
    """Output from phone formatting."""

    formatted: str | None
    errors: tuple[NumericValidationError, ...] = field(default_factory=tuple)
    success: bool = True
