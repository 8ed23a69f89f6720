"""
Containers component - Stack, queue and lookup helpers.
"""

from ._impl import (
    is_associative,
    is_list_like_keys,
    new_queue,
    queue_dequeue,
    queue_enqueue,
    safe_get,
    stack_peek,
    stack_pop,
    stack_push,
)
from .component import run_is_associative, run_safe_get
from .models import (
    AssociativeCheckInput,
    AssociativeCheckOutput,
    SafeGetInput,
    SafeGetOutput,
)

__all__ = [
    # Entry points
    "run_safe_get",
    "run_is_associative",
    # Input models
    "SafeGetInput",
    "AssociativeCheckInput",
    # Output models
    "SafeGetOutput",
    "AssociativeCheckOutput",
    # Functional core
    "stack_push",
    "stack_pop",
    "stack_peek",
    "new_queue",
    "queue_enqueue",
    "queue_dequeue",
    "safe_get",
    "is_associative",
    "is_list_like_keys",
]
