"""
Structural diff between two catalog documents.

Walks both documents in lock-step and emits one ComparisonRecord per
comparison unit:

    - missing-left: key exists only in the right document
    - missing-right: key exists only in the left document
    - identical: key exists on both sides with equal values
    - different: key exists on both sides with different values

Keys that hold a container on both sides are never records themselves;
only their descendants are. A key missing on one side is reported once,
even when its value is a whole subtree.
"""

from __future__ import annotations

from typing import Any, Iterable

from catalog_compare.engine.key_path import child_path
from catalog_compare.engine.models import ComparisonRecord, ComparisonStatus


def values_equal(left: Any, right: Any) -> bool:
    """Deep structural equality used to classify identical vs different.

    Booleans never equal numbers (``True`` vs ``1``), containers never
    equal non-containers, arrays compare element-wise and container key
    order is ignored.
    """
    if isinstance(left, dict) or isinstance(right, dict):
        if not (isinstance(left, dict) and isinstance(right, dict)):
            return False
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)

    if isinstance(left, list) or isinstance(right, list):
        if not (isinstance(left, list) and isinstance(right, list)):
            return False
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    return type(left) is type(right) and left == right


def leaf_status(left: Any, right: Any) -> ComparisonStatus:
    """Classify two present values as identical or different."""
    if values_equal(left, right):
        return ComparisonStatus.IDENTICAL
    return ComparisonStatus.DIFFERENT


def compare(
    left: dict[str, Any] | None,
    right: dict[str, Any] | None,
    prefix: str = "",
) -> list[ComparisonRecord]:
    """
    Compare two documents and return the flat list of comparison records.

    Keys of ``left`` are visited in their own order, followed by the keys
    present only in ``right``, so the output is deterministic. A side that
    is None (or not a container) is treated as an empty container.

    Args:
        left: The left document.
        right: The right document.
        prefix: Key path of the compared containers (used for recursion).

    Returns:
        The ordered list of ComparisonRecord.

    Examples:
        >>> records = compare({"a": {"b": "x"}}, {"a": {"b": "y"}})
        >>> print(records[0].key_path, records[0].status.value)  # a.b different
    """
    records: list[ComparisonRecord] = []
    _compare_containers(_as_container(left), _as_container(right), prefix, records)
    return records


def _as_container(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _compare_containers(
    left: dict[str, Any],
    right: dict[str, Any],
    prefix: str,
    records: list[ComparisonRecord],
) -> None:
    """Compare two containers and append records for every key."""
    for key, left_value in left.items():
        key_path = child_path(prefix, key)

        if key not in right:
            # Whole subtree is one record
            records.append(
                ComparisonRecord(key_path, ComparisonStatus.MISSING_RIGHT, left_value=left_value)
            )
            continue

        right_value = right[key]
        if isinstance(left_value, dict) and isinstance(right_value, dict):
            _compare_containers(left_value, right_value, key_path, records)
            continue

        records.append(
            ComparisonRecord(
                key_path,
                leaf_status(left_value, right_value),
                left_value=left_value,
                right_value=right_value,
            )
        )

    for key, right_value in right.items():
        if key not in left:
            records.append(
                ComparisonRecord(
                    child_path(prefix, key),
                    ComparisonStatus.MISSING_LEFT,
                    right_value=right_value,
                )
            )


def summarize(records: Iterable[ComparisonRecord]) -> dict[str, int]:
    """
    Count records by status.

    Returns:
        A dictionary with a count for every status, e.g.
        ``{"missing-left": 1, "missing-right": 0, "identical": 10, "different": 2}``.
    """
    summary = {status.value: 0 for status in ComparisonStatus}
    for record in records:
        summary[record.status.value] += 1
    return summary


def filter_records(
    records: Iterable[ComparisonRecord],
    statuses: Iterable[ComparisonStatus | str] | None,
) -> list[ComparisonRecord]:
    """Keep only records whose status is in ``statuses`` (None keeps all)."""
    if statuses is None:
        return list(records)
    wanted = {ComparisonStatus(status) for status in statuses}
    return [record for record in records if record.status in wanted]
