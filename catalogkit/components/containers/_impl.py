"""
Container helpers - stack, queue and lookup primitives.

Functional Core. Stack and queue helpers mutate the container they are
given; everything else is side-effect free. Empty containers and
absent keys are reported through a caller-chosen sentinel, never an
exception.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
D = TypeVar("D")


# --- Stack ---


def stack_push(stack: MutableSequence[T], value: T) -> None:
    """Push value onto the top (end) of stack."""
    stack.append(value)


def stack_pop(stack: MutableSequence[T], default: D | None = None) -> T | D | None:
    """Pop the top value, or return default when the stack is empty."""
    if not stack:
        return default
    return stack.pop()


def stack_peek(stack: Sequence[T], default: D | None = None) -> T | D | None:
    """Top value without removing it."""
    if not stack:
        return default
    return stack[-1]


# --- Queue ---


def new_queue(items: Sequence[T] = ()) -> deque[T]:
    """Empty (or pre-filled) queue with O(1) dequeue."""
    return deque(items)


def queue_enqueue(queue: MutableSequence[T] | deque[T], value: T) -> None:
    """Add value at the back of queue."""
    queue.append(value)


def queue_dequeue(
    queue: MutableSequence[T] | deque[T], default: D | None = None
) -> T | D | None:
    """
    Remove and return the front value, or default when queue is empty.

    A deque dequeues in O(1); a list shifts its remaining items.
    """
    if not queue:
        return default
    if isinstance(queue, deque):
        return queue.popleft()
    return queue.pop(0)


# --- Lookup ---


def safe_get(
    container: Mapping[Any, T] | Sequence[T], key: Any, default: D | None = None
) -> T | D | None:
    """
    Look up key, falling back to default.

    Mappings are looked up by key, sequences by in-range index. A stored
    None counts as absent, so it also yields default.
    """
    if isinstance(container, Mapping):
        value = container.get(key)
    elif isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(container):
        value = container[key]
    else:
        value = None

    return default if value is None else value


def is_list_like_keys(keys: Sequence[Any]) -> bool:
    """True when keys are exactly 0, 1, ..., n-1 in that order."""
    for expected, key in enumerate(keys):
        if isinstance(key, bool) or not isinstance(key, int) or key != expected:
            return False
    return True


def is_associative(container: Mapping[Any, Any] | Sequence[Any]) -> bool:
    """
    True when the keys are anything but a gap-free 0-based integer run.

    Empty containers, lists and tuples are never associative.
    """
    if not container or not isinstance(container, Mapping):
        return False
    return not is_list_like_keys(list(container.keys()))
