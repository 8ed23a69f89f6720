"""
Containers component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

# --- Input Models ---


@dataclass(frozen=True)
class SafeGetInput:
    """Input for a defaulted lookup."""

    container: Mapping[Any, Any] | Sequence[Any]
    key: Any
    default: Any = None


@dataclass(frozen=True)
class AssociativeCheckInput:
    """Input for checking whether keys form a plain 0-based index."""

    container: Mapping[Any, Any] | Sequence[Any]


# --- Output Models ---


@dataclass(frozen=True)
class SafeGetOutput:
    """Output from a defaulted lookup. found is False when default was used."""

    value: Any
    found: bool


@dataclass(frozen=True)
class AssociativeCheckOutput:
    """Output from the associative check."""

    is_associative: bool
    size: int
