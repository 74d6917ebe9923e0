"""EditTaskModal — change a task's title."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class EditTaskModal(ModalScreen[str | None]):
    """Edit a task title.

    Dismisses with the entered text on save (possibly blank; the session
    keeps the old title in that case), or None on cancel.
    """

    def __init__(self, title: str) -> None:
        super().__init__()
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(id="edit-modal-container"):
            yield Label("Edit Task", id="edit-modal-title")
            yield Input(value=self._title, placeholder="Edit task", id="edit-input")
            with Horizontal(id="edit-modal-buttons"):
                yield Button("Cancel", id="btn-cancel", variant="default")
                yield Button("Save", id="btn-save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#edit-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "btn-cancel":
            self.dismiss(None)
        elif event.button.id == "btn-save":
            self._save()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._save()

    def on_key(self, event) -> None:
        if event.key == "escape":
            event.stop()
            self.dismiss(None)

    def _save(self) -> None:
        self.dismiss(self.query_one("#edit-input", Input).value)
