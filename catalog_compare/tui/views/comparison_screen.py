"""
Comparison Screen for side-by-side catalog comparison and editing.

Displays the left and right catalogs in a split-screen view built from a
single reconciled tree, with synchronized navigation, diff colouring and
edits that can be exported per side.
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from catalog_compare.data_formats import Catalog, DottedKeyError
from catalog_compare.engine import (
    ABSENT,
    EditKind,
    EditStore,
    Side,
    compare,
    key_path,
    merge,
    summarize,
    values_equal,
)
from catalog_compare.tui.mixins import DualPaneMixin, ExportMixin, VimNavigationMixin
from catalog_compare.tui.widgets import (
    CatalogTreePanel,
    EditValueModal,
    format_diff_summary,
    parse_edit_value,
)


class ComparisonScreen(ExportMixin, DualPaneMixin, VimNavigationMixin, Screen):
    """Side-by-side catalog comparison view.

    Both panels render the same merge() result: the left panel shows the
    left catalog's values, the right panel the right catalog's. Edits are
    held in an EditStore and every change recomputes the comparison from
    the edited documents.
    """

    CSS = """
    ComparisonScreen {
        layout: vertical;
    }

    #summary-bar {
        dock: top;
        height: 1;
        padding: 0 1;
        background: $primary-darken-1;
        color: $text;
    }

    #comparison-container {
        height: 1fr;
    }

    #left-panel, #right-panel {
        padding: 0 1;
    }

    #left-panel {
        border-right: none;
    }
    """

    # All dual-pane bindings plus screen-specific bindings
    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("s", "toggle_sync", "Sync"),
        Binding("d", "toggle_diff", "Diff"),
        Binding("e", "expand_all", "Expand All"),
        Binding("c", "collapse_all", "Collapse All"),
        Binding("a", "add_to_other_side", "Add to Other Side"),
        Binding("r", "edit_value", "Edit"),
        Binding("delete", "delete_key", "Delete Key"),
        Binding("u", "clear_edits", "Clear Edits"),
        Binding("x", "export_side", "Export"),
    ]

    def __init__(
        self,
        left: Catalog,
        right: Catalog,
        store: EditStore | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ComparisonScreen.

        Args:
            left: The left catalog.
            right: The right catalog.
            store: Edit store to use (a fresh one if omitted).
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._catalogs: dict[Side, Catalog] = {Side.LEFT: left, Side.RIGHT: right}
        self._store = store if store is not None else EditStore()
        self._sync_enabled: bool = True
        self._diff_enabled: bool = True
        self._summary: dict[str, int] = {}

    def compose(self) -> ComposeResult:
        """Compose the screen layout with side-by-side panels."""
        yield Header()
        yield Static("", id="summary-bar", markup=False)
        with Horizontal(id="comparison-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static(
                    self._panel_header_text(Side.LEFT),
                    id="left-header",
                    classes="panel-header",
                    markup=False,
                )
                yield CatalogTreePanel(Side.LEFT, label=self._catalogs[Side.LEFT].file_name, id="left-tree")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static(
                    self._panel_header_text(Side.RIGHT),
                    id="right-header",
                    classes="panel-header",
                    markup=False,
                )
                yield CatalogTreePanel(Side.RIGHT, label=self._catalogs[Side.RIGHT].file_name, id="right-tree")
        yield Footer()

    def on_mount(self) -> None:
        """Build both panels when the screen is mounted."""
        self._refresh_comparison()
        self.get_tree(Side.LEFT).focus()
        self._update_panel_styles()

    # ============== State ==============

    @property
    def store(self) -> EditStore:
        return self._store

    @property
    def summary(self) -> dict[str, int]:
        """Per-status record counts of the current comparison."""
        return self._summary

    @property
    def sync_enabled(self) -> bool:
        return self._sync_enabled

    @property
    def diff_enabled(self) -> bool:
        return self._diff_enabled

    def current_document(self, side: Side) -> dict[str, Any]:
        """The document for ``side`` with pending edits applied."""
        return self._store.current_document(side, self._catalogs[side].data)

    def _panel_label(self, side: Side) -> str:
        return self._catalogs[side].file_name

    def _panel_header_text(self, side: Side) -> str:
        catalog = self._catalogs[side]
        text = f"{catalog.file_name} ({catalog.key_count:,} keys)"
        edit_count = len(self._store.edits_for(side))
        if edit_count:
            text += f"  [{edit_count} pending]"
        return text

    def _refresh_comparison(self) -> None:
        """Recompute diff and tree from the edited documents and rebuild both panels."""
        left_doc = self.current_document(Side.LEFT)
        right_doc = self.current_document(Side.RIGHT)

        self._summary = summarize(compare(left_doc, right_doc))
        nodes = merge(left_doc, right_doc)

        for side in Side:
            tree = self.get_tree(side)
            expanded = tree.expanded_paths()
            cursor = tree.cursor_key_path
            tree.diff_mode = self._diff_enabled
            tree.load_nodes(nodes)
            tree.restore_expanded(expanded)
            tree.move_cursor_to_path(cursor)
            self.query_one(f"#{side.value}-header", Static).update(self._panel_header_text(side))

        edit_count = len(self._store.edits_for(Side.LEFT)) + len(self._store.edits_for(Side.RIGHT))
        self.query_one("#summary-bar", Static).update(format_diff_summary(self._summary, edit_count))

    def _focus_active_widget(self) -> None:
        """Focus the tree in the active panel, keeping the cursor row aligned."""
        tree = self.get_tree(self._active_panel)
        other = self.get_tree(self._active_panel.other)
        if self._sync_enabled:
            tree.move_cursor_to_path(other.cursor_key_path)
        tree.focus()

    # ============== Edits ==============

    def apply_add(self, path: str, source: Side) -> int:
        """Copy the value at ``path`` from ``source`` to the other side.

        When both sides hold an object at ``path`` only the differing
        children are copied, so keys that exist only on the target survive.

        Returns:
            The number of edits recorded.
        """
        target = source.other
        source_value = key_path.read(self.current_document(source), path)
        target_value = key_path.read(self.current_document(target), path)

        if source_value is ABSENT or values_equal(source_value, target_value):
            return 0

        if isinstance(source_value, dict) and isinstance(target_value, dict):
            return sum(
                self.apply_add(key_path.child_path(path, key), source)
                for key in source_value
            )

        kind = EditKind.ADD if target_value is ABSENT else EditKind.MODIFY
        self._store.record_edit(target, path, source_value, kind)
        return 1

    def apply_value_edit(self, side: Side, path: str, text: str) -> bool:
        """Record a MODIFY (or ADD) edit of ``path`` on ``side`` from typed text.

        Returns:
            False (after notifying) if the typed value was rejected.
        """
        try:
            value = parse_edit_value(text)
        except DottedKeyError as e:
            self.notify(str(e), severity="error")
            return False

        current = key_path.read(self.current_document(side), path)
        kind = EditKind.ADD if current is ABSENT else EditKind.MODIFY
        self._store.record_edit(side, path, value, kind)
        self._refresh_comparison()
        return True

    def apply_delete(self, side: Side, path: str) -> bool:
        """Record a DELETE edit of ``path`` on ``side`` if the key exists there."""
        if key_path.read(self.current_document(side), path) is ABSENT:
            return False
        self._store.record_edit(side, path, None, EditKind.DELETE)
        self._refresh_comparison()
        return True

    def action_add_to_other_side(self) -> None:
        """Add the focused key of the active panel to the other side."""
        source = self._active_panel
        path = self.get_tree(source).cursor_key_path
        if path is None:
            return

        count = self.apply_add(path, source)
        if count == 0:
            self.notify("Nothing to add", severity="warning")
            return

        self._refresh_comparison()
        self.notify(f"Added {count} value{'' if count == 1 else 's'} to {source.other.value} side")

    def action_edit_value(self) -> None:
        """Open the edit modal for the focused leaf of the active panel."""
        side = self._active_panel
        tree = self.get_tree(side)
        path = tree.cursor_key_path
        if path is None:
            return

        node = tree.get_merged_node(path)
        value = node.value_for(side)
        if isinstance(value, dict) or (value is ABSENT and node.is_container):
            self.notify("Only leaf values can be edited", severity="warning")
            return

        def on_result(text: str | None) -> None:
            if text is None:
                return
            self.apply_value_edit(side, path, text)

        self.app.push_screen(
            EditValueModal(
                key_path=path,
                current_value=None if value is ABSENT else value,
                panel_label=self._panel_label(side),
            ),
            on_result,
        )

    def action_delete_key(self) -> None:
        """Remove the focused key from the active side."""
        side = self._active_panel
        path = self.get_tree(side).cursor_key_path
        if path is None:
            return

        if not self.apply_delete(side, path):
            self.notify("Key is not present on this side", severity="warning")
            return
        self.notify(f"Deleted {path} from {side.value} side")

    def action_clear_edits(self) -> None:
        """Discard all pending edits of the active side."""
        side = self._active_panel
        if not self._store.has_edits(side):
            self.notify("No pending edits")
            return
        self._store.clear(side)
        self._refresh_comparison()
        self.notify(f"Cleared edits on {side.value} side")

    def action_export_side(self) -> None:
        """Export the active side with its edits applied."""
        side = self._active_panel
        catalog = self._catalogs[side]
        self._export_side(self._store, side, catalog.data, catalog.file_name)

    # ============== View toggles ==============

    def action_toggle_sync(self) -> None:
        """Toggle synchronized scrolling and expansion between panels."""
        self._sync_enabled = not self._sync_enabled
        for side in Side:
            self.get_tree(side).sync_enabled = self._sync_enabled

        status = "enabled" if self._sync_enabled else "disabled"
        self.notify(f"Sync {status}")

    def action_toggle_diff(self) -> None:
        """Toggle diff colouring of leaf rows."""
        self._diff_enabled = not self._diff_enabled
        for side in Side:
            tree = self.get_tree(side)
            tree.diff_mode = self._diff_enabled
            tree.refresh_labels()

        status = "enabled" if self._diff_enabled else "disabled"
        self.notify(f"Diff highlighting {status}")

    def action_expand_all(self) -> None:
        """Expand all nodes in both trees."""
        for side in Side:
            self.get_tree(side).expand_all_rows()
        self.notify("Expanded all nodes")

    def action_collapse_all(self) -> None:
        """Collapse all nodes in both trees."""
        for side in Side:
            self.get_tree(side).collapse_all_rows()
        self.notify("Collapsed all nodes")

    # ============== Panel sync ==============

    def on_catalog_tree_panel_scroll_changed(
        self, message: CatalogTreePanel.ScrollChanged
    ) -> None:
        """Scroll the other panel to the same position."""
        if not self._sync_enabled:
            return
        source = Side.LEFT if message.panel_id == "left-tree" else Side.RIGHT
        self.get_tree(source.other).sync_scroll_to(message.scroll_y)

    def _sync_toggle(self, event: CatalogTreePanel.NodeExpanded | CatalogTreePanel.NodeCollapsed, expanded: bool) -> None:
        tree = event.node.tree
        path = event.node.data
        if not self._sync_enabled or path is None or not isinstance(tree, CatalogTreePanel):
            return
        self.get_tree(tree.side.other).sync_node_toggle(path, expanded)

    def on_tree_node_expanded(self, event: CatalogTreePanel.NodeExpanded) -> None:
        self._sync_toggle(event, True)

    def on_tree_node_collapsed(self, event: CatalogTreePanel.NodeCollapsed) -> None:
        self._sync_toggle(event, False)
