"""
Numeric helpers - primes, Fibonacci, memoized factorial, phone numbers.

Functional Core. The only state is FactorialCache, which callers
construct and pass in explicitly; nothing is cached at module level.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from functools import partial
from math import isqrt

PHONE_DIGITS = 11


# --- Primes & Sequences ---


def is_prime(n: int) -> bool:
    """Trial division up to the integer square root."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % divisor for divisor in range(3, isqrt(n) + 1, 2))


def fibonacci(n: int) -> int:
    """
    n-th Fibonacci number, 1-based: fibonacci(1) == fibonacci(2) == 1.

    Raises:
        ValueError: If n < 1.
    """
    if n < 1:
        raise ValueError(f"Fibonacci index must be >= 1, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


# --- Factorial ---


class FactorialCache:
    """
    Memo table for factorial results, owned by the caller.

    Tracks hits and misses for lookups made through get().
    """

    def __init__(self) -> None:
        self._values: dict[int, int] = {}
        self.hits = 0
        self.misses = 0

    def __contains__(self, n: object) -> bool:
        return n in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, n: int) -> int | None:
        """Cached factorial of n, or None. Counts as a hit or a miss."""
        value = self._values.get(n)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def peek(self, n: int) -> int | None:
        """Cached factorial of n without touching the counters."""
        return self._values.get(n)

    def store(self, n: int, value: int) -> None:
        self._values[n] = value

    def clear(self) -> None:
        self._values.clear()
        self.hits = 0
        self.misses = 0


def factorial(n: int, cache: FactorialCache | None = None) -> int:
    """
    n! with optional memoization.

    On a miss the product is resumed from the largest cached k < n and
    every intermediate result is stored, so factorial(8) after
    factorial(5) multiplies only 6, 7 and 8.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"Factorial is undefined for negative numbers, got {n}")
    if cache is None:
        cache = FactorialCache()

    cached = cache.get(n)
    if cached is not None:
        return cached

    start = n
    while start > 1 and start not in cache:
        start -= 1
    result = cache.peek(start) or 1

    if start <= 1:
        cache.store(start, 1)
    for k in range(start + 1, n + 1):
        result *= k
        cache.store(k, result)
    return result


# --- Formatting ---


def format_phone(phone: str) -> str | None:
    """
    Format an 11-digit number as +7(XXX)XXX-XX-XX.

    The leading digit is replaced by the +7 country code. Returns None
    for anything that is not exactly 11 ASCII digits.
    """
    if len(phone) != PHONE_DIGITS or not (phone.isascii() and phone.isdigit()):
        return None
    return f"+7({phone[1:4]}){phone[4:7]}-{phone[7:9]}-{phone[9:]}"


# --- Counters ---


def make_counter(start: int = 0) -> Callable[[], int]:
    """Callable returning start, start + 1, ... on successive calls."""
    return partial(next, itertools.count(start))
