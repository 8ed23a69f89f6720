"""
Numeric component - Factorial and phone formatting entry points.
"""

from __future__ import annotations

from ._impl import PHONE_DIGITS, FactorialCache, factorial, format_phone
from .models import (
    FactorialInput,
    FactorialOutput,
    FormatPhoneInput,
    FormatPhoneOutput,
    NumericValidationError,
)


def run_factorial(inp: FactorialInput, cache: FactorialCache) -> FactorialOutput:
    """Compute n! through the caller's cache."""
    if inp.n < 0:
        return FactorialOutput(
            value=None,
            errors=(
                NumericValidationError(
                    code="factorial_negative",
                    message=f"Factorial is undefined for {inp.n}",
                ),
            ),
            success=False,
        )

    hits_before = cache.hits
    value = factorial(inp.n, cache)
    return FactorialOutput(value=value, from_cache=cache.hits > hits_before)


def run_format_phone(inp: FormatPhoneInput) -> FormatPhoneOutput:
    """Format a phone number or explain why it cannot be formatted."""
    formatted = format_phone(inp.phone)
    if formatted is None:
        return FormatPhoneOutput(
            formatted=None,
            errors=(
                NumericValidationError(
                    code="phone_invalid",
                    message=f"Phone number must be exactly {PHONE_DIGITS} digits",
                ),
            ),
            success=False,
        )
    return FormatPhoneOutput(formatted=formatted)
