"""
Diff indicator helpers for colouring reconciled tree rows.

Each leaf row is coloured from the point of view of the panel showing it:
    - missing: the key is absent on this side
    - extra: the key exists here but not on the other side
    - changed: the key exists on both sides with different values
    - unchanged: the values match

Container rows are never colour-coded; their status is informational.
"""

from __future__ import annotations

from catalog_compare.engine import ComparisonStatus, Side, TreeNode, coerce_side

DIFF_STYLES: dict[str, str] = {
    "missing": "red",
    "extra": "green",
    "changed": "yellow",
    "unchanged": "",
}

SUMMARY_LABELS: dict[str, str] = {
    ComparisonStatus.MISSING_LEFT.value: "Missing left",
    ComparisonStatus.MISSING_RIGHT.value: "Missing right",
    ComparisonStatus.IDENTICAL.value: "Identical",
    ComparisonStatus.DIFFERENT.value: "Different",
}


def get_node_diff_type(node: TreeNode, side: Side | str) -> str:
    """
    Return the diff type of a row as seen from ``side``.

    Examples:
        >>> get_node_diff_type(node, "left")  # "missing" when only the right has it
    """
    side = coerce_side(side)
    if not node.has_side(side):
        return "missing"
    if not node.has_side(side.other):
        return "extra"
    if node.status is ComparisonStatus.DIFFERENT:
        return "changed"
    return "unchanged"


def get_node_diff_class(node: TreeNode, side: Side | str) -> str:
    """Return the CSS-style class name for a row, e.g. ``"diff-missing"``."""
    return f"diff-{get_node_diff_type(node, side)}"


def get_node_style(node: TreeNode, side: Side | str, diff_mode: bool = True) -> str:
    """Return the Rich style for a row; empty for containers or when diff mode is off."""
    if not diff_mode or node.is_container:
        return ""
    return DIFF_STYLES[get_node_diff_type(node, side)]


def format_diff_summary(summary: dict[str, int], edit_count: int = 0) -> str:
    """Render per-status counts as a single status bar line."""
    parts = [f"{label}: {summary.get(status, 0)}" for status, label in SUMMARY_LABELS.items()]
    if edit_count:
        parts.append(f"Pending edits: {edit_count}")
    return "  |  ".join(parts)
