"""
Containers component - Lookup entry points.

Stack and queue helpers are used directly since they mutate their
argument; lookups go through the run_* functions below.
"""

from __future__ import annotations

from collections.abc import Mapping

from ._impl import is_associative, safe_get
from .models import (
    AssociativeCheckInput,
    AssociativeCheckOutput,
    SafeGetInput,
    SafeGetOutput,
)

_MISSING = object()


def run_safe_get(inp: SafeGetInput) -> SafeGetOutput:
    """
    Look up a key with a default.

    found tells a present value apart from the default, even when the
    stored value happens to equal the default.
    """
    value = safe_get(inp.container, inp.key, _MISSING)
    if value is _MISSING:
        return SafeGetOutput(value=inp.default, found=False)
    return SafeGetOutput(value=value, found=True)


def run_is_associative(inp: AssociativeCheckInput) -> AssociativeCheckOutput:
    """Check whether a container is keyed by anything but 0..n-1."""
    container = inp.container
    size = len(container.keys()) if isinstance(container, Mapping) else len(container)
    return AssociativeCheckOutput(
        is_associative=is_associative(container),
        size=size,
    )
