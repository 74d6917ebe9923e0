"""ticklist TUI — main application entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from textual.app import App, ComposeResult
from textual.reactive import reactive

from ticklist.tui.screens.main import MainScreen
from ticklist.tui.theme import ThemeMode

if TYPE_CHECKING:
    from ticklist.core.session import TaskSession

logger = logging.getLogger("ticklist.tui.app")


class TicklistApp(App[None]):
    """Single-screen task list.

    ``theme_mode`` is the only UI state the app holds; widgets that care
    about it watch it instead of reaching into a global.
    """

    CSS_PATH = Path(__file__).parent / "theme.tcss"
    TITLE = "Ticklist"
    BINDINGS = [
        ("t", "toggle_theme", "Theme"),
        ("q", "quit", "Quit"),
    ]

    theme_mode: reactive[ThemeMode] = reactive(ThemeMode.LIGHT)

    def __init__(self, session: TaskSession, theme_mode: ThemeMode = ThemeMode.LIGHT) -> None:
        super().__init__()
        self.session = session
        self.set_reactive(TicklistApp.theme_mode, theme_mode)

    def compose(self) -> ComposeResult:
        # MainScreen owns all composition
        return iter([])

    def on_mount(self) -> None:
        self.theme = self.theme_mode.textual_theme
        self.push_screen(MainScreen(self.session))

    def watch_theme_mode(self, mode: ThemeMode) -> None:
        self.theme = mode.textual_theme

    def action_toggle_theme(self) -> None:
        self.theme_mode = self.theme_mode.toggled()
        logger.debug("Theme switched to %s", self.theme_mode)


def run_tui(session: TaskSession, theme: ThemeMode | None = None) -> None:
    """Launch the TUI on ``session``; the start theme defaults to config."""
    if theme is None:
        from ticklist.config.settings import get_settings

        theme = ThemeMode(get_settings().ui.theme)
    TicklistApp(session, theme_mode=theme).run()
