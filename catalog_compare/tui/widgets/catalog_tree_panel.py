"""
Catalog Tree Panel widget for displaying one side of a reconciled tree.

Both panels of the comparison screen are built from the same merge()
result, so every key occupies the same row on both sides. Keys missing
on a panel's side are still shown (as an absent marker), which keeps the
rows aligned and lets the user add them from the other side.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.message import Message
from textual.widgets import Tree
from textual.widgets.tree import TreeNode

from catalog_compare.data_formats import ABSENT_MARKER, truncate_value
from catalog_compare.engine import Side, coerce_side
from catalog_compare.engine import TreeNode as MergedNode
from catalog_compare.tui.widgets.diff_indicator import get_node_style

# Maximum characters of a leaf value shown in a row
MAX_LABEL_VALUE_LENGTH = 50


def build_node_label(node: MergedNode, side: Side | str, diff_mode: bool = True) -> Text:
    """
    Build the row label for ``node`` as shown in the ``side`` panel.

    Rows are rendered as:
        - Containers: `{} key_name` (`{} key_name —` when absent on this side)
        - Leaves: `"key": value` (`"key": —` when absent on this side)

    Args:
        node: The reconciled tree node.
        side: Which panel the label is for.
        diff_mode: Whether to colour leaf rows by diff status.

    Returns:
        A Rich Text label (never markup, so keys may contain brackets).
    """
    side = coerce_side(side)
    value = node.value_for(side)
    present = node.has_side(side)
    style = get_node_style(node, side, diff_mode)

    if node.is_container:
        if present and isinstance(value, dict):
            return Text(f"{{}} {node.key}", style=style)
        if present:
            # Leaf on this side, container on the other
            return Text(f'"{node.key}": {truncate_value(value, MAX_LABEL_VALUE_LENGTH)}', style=style)
        return Text(f"{{}} {node.key} {ABSENT_MARKER}", style="dim")

    if not present:
        return Text(f'"{node.key}": {ABSENT_MARKER}', style=style or "dim")

    # Escape newlines so every row stays on one line
    display = truncate_value(value, MAX_LABEL_VALUE_LENGTH).replace("\n", "\\n").replace("\r", "\\r")
    return Text(f'"{node.key}": {display}', style=style)


class CatalogTreePanel(Tree[str]):
    """
    Tree widget showing one side of a reconciled catalog tree.

    Each Textual node carries the key path of the merged node it renders
    as its ``data``, which is how both panels are kept in step.

    Attributes:
        side: The side this panel renders.
        sync_enabled: Whether scroll and expansion synchronization is enabled.
        diff_mode: Whether diff colouring is enabled.
    """

    class ScrollChanged(Message):
        """Posted when the scroll position changes.

        Attributes:
            scroll_y: The vertical scroll position.
            panel_id: The ID of the panel that emitted this message.
        """

        def __init__(self, scroll_y: float, panel_id: str) -> None:
            self.scroll_y = scroll_y
            self.panel_id = panel_id
            super().__init__()

    class FieldRequested(Message):
        """Posted when the user asks to see the full value of the cursor row.

        Attributes:
            key_path: The key path of the row.
            value: The full (untruncated) value on this panel's side.
            present: Whether the key exists on this panel's side.
            panel_id: The ID of the panel that emitted this message.
        """

        def __init__(self, key_path: str, value: Any, present: bool, panel_id: str) -> None:
            self.key_path = key_path
            self.value = value
            self.present = present
            self.panel_id = panel_id
            super().__init__()

    def __init__(
        self,
        side: Side | str,
        label: str = "root",
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """
        Initialize the catalog tree panel.

        Args:
            side: The side this panel renders ('left' or 'right').
            label: The label for the root node.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(label, id=id, classes=classes)
        self.side: Side = coerce_side(side)
        self.sync_enabled: bool = True
        self.diff_mode: bool = True
        self._key_path_nodes: dict[str, TreeNode[str]] = {}
        self._merged_nodes: dict[str, MergedNode] = {}

    def load_nodes(self, nodes: list[MergedNode], label: str | None = None) -> None:
        """
        Populate the tree from reconciled nodes, replacing any previous content.

        Args:
            nodes: Top-level nodes from merge().
            label: Optional new label for the root node.
        """
        self.clear()
        self._key_path_nodes.clear()
        self._merged_nodes.clear()
        if label is not None:
            self.root.set_label(Text(label))
        self._add_nodes(self.root, nodes)
        self.root.expand()

    def _add_nodes(self, parent: TreeNode[str], nodes: list[MergedNode]) -> None:
        for node in nodes:
            label = build_node_label(node, self.side, self.diff_mode)
            if node.is_container:
                child = parent.add(label, data=node.key_path, allow_expand=True)
                self._add_nodes(child, node.children)
            else:
                child = parent.add_leaf(label, data=node.key_path)
            self._key_path_nodes[node.key_path] = child
            self._merged_nodes[node.key_path] = node

    def refresh_labels(self) -> None:
        """Re-render every row label (after toggling diff mode)."""
        for key_path, tree_node in self._key_path_nodes.items():
            tree_node.set_label(
                build_node_label(self._merged_nodes[key_path], self.side, self.diff_mode)
            )

    def find_tree_node(self, key_path: str) -> TreeNode[str] | None:
        """Return the Textual node rendering ``key_path``, if any."""
        return self._key_path_nodes.get(key_path)

    def get_merged_node(self, key_path: str) -> MergedNode | None:
        """Return the reconciled node rendered at ``key_path``, if any."""
        return self._merged_nodes.get(key_path)

    @property
    def cursor_key_path(self) -> str | None:
        """Key path of the row under the cursor (None on the root row)."""
        node = self.cursor_node
        return node.data if node is not None else None

    def expanded_paths(self) -> set[str]:
        """Return the key paths of all expanded rows."""
        return {path for path, node in self._key_path_nodes.items() if node.is_expanded}

    def restore_expanded(self, paths: set[str]) -> None:
        """Expand the rows at ``paths`` that still exist."""
        for path in paths:
            node = self._key_path_nodes.get(path)
            if node is not None and node.allow_expand:
                node.expand()

    def move_cursor_to_path(self, key_path: str | None) -> None:
        """Move the cursor to the row at ``key_path`` if it exists."""
        if key_path is None:
            return
        node = self._key_path_nodes.get(key_path)
        if node is not None:
            # Line numbers are only assigned once the rebuilt tree is laid out
            self.call_after_refresh(self.move_cursor, node)

    def sync_scroll_to(self, scroll_y: float) -> None:
        """Synchronize scroll position from another panel."""
        if self.sync_enabled:
            self.scroll_y = scroll_y

    def watch_scroll_y(self, old_value: float, new_value: float) -> None:
        """Emit ScrollChanged so the other panel can follow."""
        super().watch_scroll_y(old_value, new_value)
        if self.sync_enabled and self.id and old_value != new_value:
            self.post_message(self.ScrollChanged(new_value, self.id))

    def sync_node_toggle(self, key_path: str, expanded: bool) -> None:
        """Synchronize the expansion state of one row from another panel."""
        if not self.sync_enabled:
            return
        node = self._key_path_nodes.get(key_path)
        if node is None:
            return
        # Only act on a real change, otherwise the panels keep echoing
        if expanded and not node.is_expanded:
            node.expand()
        elif not expanded and node.is_expanded:
            node.collapse()

    def expand_all_rows(self) -> None:
        for node in self._key_path_nodes.values():
            if node.allow_expand:
                node.expand()

    def collapse_all_rows(self) -> None:
        for node in self._key_path_nodes.values():
            if node.allow_expand:
                node.collapse()

    def emit_field_requested(self) -> None:
        """Post a FieldRequested message for the cursor row."""
        key_path = self.cursor_key_path
        if key_path is None or not self.id:
            return

        merged = self._merged_nodes[key_path]
        self.post_message(
            self.FieldRequested(
                key_path=key_path,
                value=merged.value_for(self.side),
                present=merged.has_side(self.side),
                panel_id=self.id,
            )
        )
