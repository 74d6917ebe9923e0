"""TicklistHeader — title and progress on the left, theme toggle on the right."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Static

from ticklist.tui.theme import ThemeMode


class TicklistHeader(Widget):
    """Fixed header bar.

    Extends Widget (not Horizontal) so the fixed height below is not
    overridden by Horizontal.DEFAULT_CSS ``height: auto``.
    """

    DEFAULT_CSS = """
    TicklistHeader {
        layout: horizontal;
        dock: top;
        height: 3;
        padding: 0 1;
        background: $panel;
    }
    #header-title {
        width: 1fr;
        height: 3;
        content-align: left middle;
        text-style: bold;
    }
    #header-progress {
        width: auto;
        height: 3;
        padding: 0 2;
        content-align: right middle;
        color: $text-muted;
    }
    #btn-theme {
        min-width: 10;
    }
    """

    done: reactive[int] = reactive(0)
    total: reactive[int] = reactive(0)

    def compose(self) -> ComposeResult:
        yield Static("Todo List", id="header-title")
        yield Static("", id="header-progress")
        yield Button(ThemeMode.LIGHT.toggle_label, id="btn-theme", variant="default")

    def on_mount(self) -> None:
        self.watch(self.app, "theme_mode", self._on_theme_mode, init=True)
        self._update_progress()

    def set_counts(self, done: int, total: int) -> None:
        self.done = done
        self.total = total

    def watch_done(self, _: int) -> None:
        self._update_progress()

    def watch_total(self, _: int) -> None:
        self._update_progress()

    def _update_progress(self) -> None:
        if not self.is_mounted:
            return
        text = f"{self.done}/{self.total} done" if self.total else "No tasks"
        self.query_one("#header-progress", Static).update(text)

    def _on_theme_mode(self, mode: ThemeMode) -> None:
        self.query_one("#btn-theme", Button).label = mode.toggle_label

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-theme":
            event.stop()
            self.app.action_toggle_theme()
