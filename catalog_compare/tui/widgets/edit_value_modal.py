"""Modal screen for editing the value of a catalog key."""

import json
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label

from catalog_compare.data_formats import parse_json, sanitize_object_keys


def parse_edit_value(text: str) -> Any:
    """Interpret the text typed into the edit box.

    Valid JSON is taken literally (``42``, ``true``, ``null``, ``"quoted"``,
    ``{"a": 1}``); anything else is stored as a plain string, which is
    what a translator typing a message expects. Object values go through
    the same key sanitization as loaded catalogs.

    Raises:
        DottedKeyError: If an object value has a key containing ".".

    Examples:
        >>> parse_edit_value("42")
        42
        >>> parse_edit_value("Hello")
        'Hello'
    """
    try:
        value = parse_json(text)
    except ValueError:
        return text
    return sanitize_object_keys(value)


def initial_edit_text(value: Any) -> str:
    """Return the text the edit box starts with for ``value``."""
    if isinstance(value, str):
        # Quote strings that would otherwise parse as another JSON type
        if parse_edit_value(value) != value:
            return json.dumps(value, ensure_ascii=False)
        return value
    return json.dumps(value, ensure_ascii=False)


class EditValueModal(ModalScreen[str | None]):
    """A modal with a single input for a new key value.

    Dismisses with the entered text, or None when cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    EditValueModal {
        align: center middle;
    }

    EditValueModal > Vertical {
        width: 70%;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    EditValueModal .modal-header {
        height: auto;
        padding: 1 2;
        background: $primary;
        color: $text;
        text-align: center;
        text-style: bold;
    }

    EditValueModal .field-key-label {
        height: auto;
        padding: 1 0;
        color: $secondary;
        text-style: bold;
    }

    EditValueModal .close-hint {
        height: auto;
        padding: 1 0 0 0;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        key_path: str,
        current_value: Any,
        panel_label: str,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.key_path = key_path
        self.current_value = current_value
        self.panel_label = panel_label

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(f"Edit {self.panel_label}", classes="modal-header", markup=False)
            yield Label(f'Key: "{self.key_path}"', classes="field-key-label", markup=False)
            yield Input(value=initial_edit_text(self.current_value), id="edit-input")
            yield Label("ENTER to save, ESC to cancel", classes="close-hint")

    def on_mount(self) -> None:
        self.query_one("#edit-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
