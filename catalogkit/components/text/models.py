"""
Text component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Errors ---


@dataclass(frozen=True)
class TextValidationError:
    """Text validation error."""

    code: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class ValidatePasswordInput:
    """Input for checking password strength."""

    password: str


@dataclass(frozen=True)
class ExtractEmailsInput:
    """Input for pulling e-mail addresses out of free text."""

    text: str


@dataclass(frozen=True)
class MaskNumbersInput:
    """Input for hiding digit runs."""

    text: str
    mask: str = "..."


# --- Output Models ---


@dataclass(frozen=True)
class PasswordCheckOutput:
    """Output from password validation."""

    is_valid: bool
    errors: tuple[TextValidationError, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ExtractEmailsOutput:
    """Output from e-mail extraction."""

    emails: tuple[str, ...]
    total: int


@dataclass(frozen=True)
class MaskNumbersOutput:
    """Output from digit masking."""

    text: str
    replaced: int
