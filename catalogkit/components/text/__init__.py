"""
Text component - String and regex helpers.
"""

from ._impl import (
    build_full_name,
    build_search_query,
    csv_to_tags,
    extract_emails,
    extract_file_name,
    first_and_last_char,
    mask_numbers,
    password_errors,
    tags_to_csv,
    to_title_case,
    validate_password,
)
from .component import run_extract_emails, run_mask_numbers, run_validate_password
from .models import (
    ExtractEmailsInput,
    ExtractEmailsOutput,
    MaskNumbersInput,
    MaskNumbersOutput,
    PasswordCheckOutput,
    TextValidationError,
    ValidatePasswordInput,
)

__all__ = [
    # Entry points
    "run_validate_password",
    "run_extract_emails",
    "run_mask_numbers",
    # Input models
    "ValidatePasswordInput",
    "ExtractEmailsInput",
    "MaskNumbersInput",
    # Output models
    "PasswordCheckOutput",
    "ExtractEmailsOutput",
    "MaskNumbersOutput",
    "TextValidationError",
    # Functional core
    "build_full_name",
    "build_search_query",
    "csv_to_tags",
    "extract_emails",
    "extract_file_name",
    "first_and_last_char",
    "mask_numbers",
    "password_errors",
    "tags_to_csv",
    "to_title_case",
    "validate_password",
]
