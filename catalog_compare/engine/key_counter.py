"""Recursive key counting for catalog quota checks."""

from __future__ import annotations

from typing import Any

# Returned by count_keys_bounded() once the limit is exceeded
LIMIT_EXCEEDED = -1


def count_keys(value: Any) -> int:
    """Count every key at every level, container keys included.

    Arrays are never descended.

    Examples:
        >>> count_keys({"app": {"title": "My App", "welcome": "Hello"}})
        3
    """
    if not isinstance(value, dict):
        return 0

    count = len(value)
    for child in value.values():
        if isinstance(child, dict):
            count += count_keys(child)
    return count


def count_keys_bounded(value: Any, limit: int) -> int:
    """Count keys like count_keys(), stopping early past ``limit``.

    Returns:
        The key count, or LIMIT_EXCEEDED as soon as the running total
        goes over ``limit``.
    """
    if not isinstance(value, dict):
        return 0

    total = 0
    stack = [value]
    while stack:
        container = stack.pop()
        total += len(container)
        if total > limit:
            return LIMIT_EXCEEDED
        stack.extend(child for child in container.values() if isinstance(child, dict))
    return total
