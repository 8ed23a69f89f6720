"""
Numeric component - Primes, Fibonacci, factorial and phone helpers.
"""

from ._impl import (
    FactorialCache,
    factorial,
    fibonacci,
    format_phone,
    is_prime,
    make_counter,
)
from .component import run_factorial, run_format_phone
from .models import (
    FactorialInput,
    FactorialOutput,
    FormatPhoneInput,
    FormatPhoneOutput,
    NumericValidationError,
)

__all__ = [
    # Entry points
    "run_factorial",
    "run_format_phone",
    # Input models
    "FactorialInput",
    "FormatPhoneInput",
    # Output models
    "FactorialOutput",
    "FormatPhoneOutput",
    "NumericValidationError",
    # Functional core
    "FactorialCache",
    "factorial",
    "fibonacci",
    "format_phone",
    "is_prime",
    "make_counter",
]
