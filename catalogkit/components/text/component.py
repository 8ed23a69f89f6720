"""
Text component - Regex driven validation and extraction.
"""

from __future__ import annotations

from ._impl import DIGITS_PATTERN, extract_emails, password_errors, validate_password
from .models import (
    ExtractEmailsInput,
    ExtractEmailsOutput,
    MaskNumbersInput,
    MaskNumbersOutput,
    PasswordCheckOutput,
    ValidatePasswordInput,
)


def run_validate_password(inp: ValidatePasswordInput) -> PasswordCheckOutput:
    """Check a password and list the unmet requirements."""
    if validate_password(inp.password):
        return PasswordCheckOutput(is_valid=True)

    return PasswordCheckOutput(
        is_valid=False,
        errors=tuple(password_errors(inp.password)),
    )


def run_extract_emails(inp: ExtractEmailsInput) -> ExtractEmailsOutput:
    """Extract e-mail addresses from text."""
    emails = extract_emails(inp.text)
    return ExtractEmailsOutput(emails=tuple(emails), total=len(emails))


def run_mask_numbers(inp: MaskNumbersInput) -> MaskNumbersOutput:
    """Mask digit runs and report how many were replaced."""
    text, replaced = DIGITS_PATTERN.subn(lambda _match: inp.mask, inp.text)
    return MaskNumbersOutput(text=text, replaced=replaced)
