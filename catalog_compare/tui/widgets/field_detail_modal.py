"""Modal screen for displaying the full value of a catalog key."""

import json
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from catalog_compare.data_formats import ABSENT_MARKER


def format_detail_value(value: Any, present: bool = True) -> str:
    """Format a value for the detail view.

    Strings are shown as-is, containers as indented JSON and scalars in
    their JSON spelling (``null``, ``true``). A key missing on this side
    is shown as the absent marker.
    """
    if not present:
        return f"{ABSENT_MARKER} (key not present on this side)"
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


class FieldDetailModal(ModalScreen[None]):
    """A modal screen that displays the full value of one catalog key."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "Close"),
        Binding("q", "quit", "Quit App"),
    ]

    CSS = """
    FieldDetailModal {
        align: center middle;
    }

    FieldDetailModal > Vertical {
        width: 80%;
        height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    FieldDetailModal .modal-header {
        dock: top;
        height: auto;
        padding: 1 2;
        background: $primary;
        color: $text;
        text-align: center;
        text-style: bold;
    }

    FieldDetailModal .field-key-label {
        dock: top;
        height: auto;
        padding: 1 2;
        background: $surface-darken-1;
        color: $secondary;
        text-style: bold;
    }

    FieldDetailModal .content-container {
        height: 1fr;
        padding: 1 2;
        background: $surface-darken-2;
    }

    FieldDetailModal .field-content {
        width: 100%;
        height: auto;
        padding: 0;
    }

    FieldDetailModal .close-hint {
        dock: bottom;
        height: auto;
        padding: 1 2;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        key_path: str,
        value: Any,
        panel_label: str,
        present: bool = True,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the field detail modal.

        Args:
            key_path: Dotted key path of the field (e.g., "menu.file.open").
            value: The full value on the panel's side.
            panel_label: The panel the value comes from (catalog file name).
            present: Whether the key exists on that side.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.key_path = key_path
        self.value = value
        self.panel_label = panel_label
        self.present = present

    def compose(self) -> ComposeResult:
        """Compose the modal content."""
        with Vertical():
            yield Label(self.panel_label, classes="modal-header", markup=False)
            yield Label(f'Key: "{self.key_path}"', classes="field-key-label", markup=False)
            with ScrollableContainer(classes="content-container"):
                yield Static(
                    format_detail_value(self.value, self.present),
                    classes="field-content",
                    markup=False,
                )
            yield Label("Press ESC or ENTER to close", classes="close-hint")

    def action_close(self) -> None:
        """Close the modal."""
        self.dismiss(None)

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()
