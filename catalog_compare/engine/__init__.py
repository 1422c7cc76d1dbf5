"""
Comparison engine for hierarchical catalogs.

Usage:
    from catalog_compare.engine import compare, merge, EditStore

    records = compare(left, right)
    tree = merge(left, right)
"""

from catalog_compare.engine.diff_engine import (
    compare,
    filter_records,
    leaf_status,
    summarize,
    values_equal,
)
from catalog_compare.engine.edit_store import EditStore
from catalog_compare.engine.key_counter import LIMIT_EXCEEDED, count_keys, count_keys_bounded
from catalog_compare.engine.models import (
    ABSENT,
    ComparisonRecord,
    ComparisonStatus,
    EditKind,
    EditRecord,
    InvalidSideError,
    Side,
    TreeNode,
    coerce_side,
    is_container,
)
from catalog_compare.engine.tree_reconciler import find_node, iter_nodes, merge

__all__ = [
    # Data model
    "ABSENT",
    "ComparisonRecord",
    "ComparisonStatus",
    "EditKind",
    "EditRecord",
    "InvalidSideError",
    "Side",
    "TreeNode",
    "coerce_side",
    "is_container",
    # Key counting
    "LIMIT_EXCEEDED",
    "count_keys",
    "count_keys_bounded",
    # Structural diff
    "compare",
    "filter_records",
    "leaf_status",
    "summarize",
    "values_equal",
    # Tree reconciliation
    "find_node",
    "iter_nodes",
    "merge",
    # Edits
    "EditStore",
]
