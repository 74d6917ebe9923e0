"""MainScreen — the single task-list screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Button, Footer, Input, ListView, Static

from ticklist.tui.screens.edit_modal import EditTaskModal
from ticklist.tui.widgets.header import TicklistHeader
from ticklist.tui.widgets.task_item import TaskItem

if TYPE_CHECKING:
    from ticklist.core.session import TaskSession

logger = logging.getLogger("ticklist.tui.main")


class _HRow(Widget):
    """Horizontal row — avoids Horizontal's height:auto problem."""

    DEFAULT_CSS = "_HRow { layout: horizontal; overflow: hidden hidden; }"


class MainScreen(Screen):
    """Header, add bar and the task list."""

    BINDINGS = [
        ("space", "toggle_done", "Done"),
        ("e", "edit", "Edit"),
        ("d", "delete", "Delete"),
        Binding("delete", "delete", "Delete", show=False),
        ("u", "undo", "Undo"),
        ("ctrl+up", "move_up", "Move up"),
        ("ctrl+down", "move_down", "Move down"),
        Binding("escape", "focus_list", "List", show=False),
    ]

    def __init__(self, session: TaskSession) -> None:
        super().__init__()
        self._session = session

    def compose(self) -> ComposeResult:
        yield TicklistHeader()
        with _HRow(id="add-row"):
            yield Input(placeholder="Add a task", id="add-input")
            yield Button("Add", id="btn-add", variant="primary")
        yield Static("No tasks yet. Type one above and press Enter.", id="empty-hint")
        yield ListView(id="task-list")
        yield Footer()

    async def on_mount(self) -> None:
        await self._refresh_list()
        self.query_one("#add-input", Input).focus()

    # ------------------------------------------------------------------
    # List rendering
    # ------------------------------------------------------------------

    async def _refresh_list(self, highlight: int | None = None) -> None:
        """Rebuild the rows from the session and restore the cursor."""
        list_view = self.query_one("#task-list", ListView)
        previous = list_view.index
        tasks = self._session.tasks

        await list_view.clear()
        await list_view.extend(TaskItem(task) for task in tasks)

        target = highlight if highlight is not None else previous
        if tasks:
            list_view.index = min(max(target or 0, 0), len(tasks) - 1)

        self.query_one("#empty-hint", Static).display = not tasks
        self.query_one(TicklistHeader).set_counts(*self._session.store.counts())

    def _selected_index(self) -> int | None:
        index = self.query_one("#task-list", ListView).index
        if index is None or not 0 <= index < len(self._session):
            return None
        return index

    def _check_saved(self) -> None:
        if self._session.last_save_ok is False:
            self.notify(
                "Could not save tasks; changes are kept in memory.",
                severity="error",
                timeout=5,
            )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "add-input":
            await self._add_task()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-add":
            await self._add_task()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Enter / click on a row opens the edit dialog."""
        self.action_edit()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def _add_task(self) -> None:
        add_input = self.query_one("#add-input", Input)
        before = len(self._session)
        self._session.add(add_input.value)
        if len(self._session) == before:
            return
        add_input.value = ""
        await self._refresh_list(highlight=len(self._session) - 1)
        self._check_saved()

    async def action_toggle_done(self) -> None:
        index = self._selected_index()
        if index is None:
            return
        self._session.toggle_done(index)
        await self._refresh_list(highlight=index)
        self._check_saved()

    def action_edit(self) -> None:
        index = self._selected_index()
        if index is None:
            return
        task = self._session.store.get(index)

        async def _on_result(text: str | None) -> None:
            if text is None:
                return
            position = self._session.store.index_of(task.id)
            if position is None:
                return
            self._session.edit_title(position, text)
            await self._refresh_list(highlight=position)
            self._check_saved()

        self.app.push_screen(EditTaskModal(task.title), callback=_on_result)

    async def action_delete(self) -> None:
        index = self._selected_index()
        if index is None:
            return
        removed = self._session.remove(index)
        await self._refresh_list(highlight=index)
        self.notify(f"Deleted '{removed.task.title}'. Press u to undo.", timeout=5)
        self._check_saved()

    async def action_undo(self) -> None:
        restored = self._session.undo_last()
        if restored is None:
            self.notify("Nothing to undo.", severity="warning", timeout=3)
            return
        await self._refresh_list(highlight=self._session.store.index_of(restored.id))
        self._check_saved()

    async def action_move_up(self) -> None:
        index = self._selected_index()
        if index is None:
            return
        self._session.move_up(index)
        await self._refresh_list(highlight=max(index - 1, 0))
        self._check_saved()

    async def action_move_down(self) -> None:
        index = self._selected_index()
        if index is None:
            return
        self._session.move_down(index)
        await self._refresh_list(highlight=min(index + 1, len(self._session) - 1))
        self._check_saved()

    def action_focus_list(self) -> None:
        self.query_one("#task-list", ListView).focus()
