"""
Reconcile two documents into one ordered tree for dual-column display.

Unlike the structural diff, a key missing on one side is not collapsed
into a single unit: whenever either side holds a container, its children
are exposed so every key can be inspected and added to the other side.
Children are sorted by key at every level.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from catalog_compare.engine.diff_engine import leaf_status
from catalog_compare.engine.key_path import child_path
from catalog_compare.engine.models import ABSENT, ComparisonStatus, TreeNode


def merge(
    left: dict[str, Any] | None,
    right: dict[str, Any] | None,
    prefix: str = "",
) -> list[TreeNode]:
    """
    Merge two documents into a list of TreeNode sorted by key.

    Args:
        left: The left document (None is treated as empty).
        right: The right document (None is treated as empty).
        prefix: Key path of the merged containers (used for recursion).

    Returns:
        The top-level nodes, each carrying its sorted children.
    """
    left = left if isinstance(left, dict) else {}
    right = right if isinstance(right, dict) else {}

    nodes: list[TreeNode] = []
    for key in sorted(left.keys() | right.keys()):
        has_left = key in left
        has_right = key in right
        left_value = left[key] if has_left else ABSENT
        right_value = right[key] if has_right else ABSENT

        left_is_container = isinstance(left_value, dict)
        right_is_container = isinstance(right_value, dict)
        key_path = child_path(prefix, key)

        node = TreeNode(
            key=key,
            key_path=key_path,
            left_value=left_value,
            right_value=right_value,
            has_left=has_left,
            has_right=has_right,
            status=_node_status(has_left, has_right, left_value, right_value),
            is_container=left_is_container or right_is_container,
        )

        if node.is_container:
            node.children = merge(
                left_value if left_is_container else {},
                right_value if right_is_container else {},
                key_path,
            )

        nodes.append(node)

    return nodes


def _node_status(
    has_left: bool, has_right: bool, left_value: Any, right_value: Any
) -> ComparisonStatus:
    # Container rows get a status too, but it is informational only
    if not has_left:
        return ComparisonStatus.MISSING_LEFT
    if not has_right:
        return ComparisonStatus.MISSING_RIGHT
    return leaf_status(left_value, right_value)


def iter_nodes(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Walk a reconciled tree depth-first, parents before children."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def find_node(nodes: Iterable[TreeNode], key_path: str) -> TreeNode | None:
    """Return the node at ``key_path``, or None if it is not in the tree."""
    for node in iter_nodes(nodes):
        if node.key_path == key_path:
            return node
    return None
