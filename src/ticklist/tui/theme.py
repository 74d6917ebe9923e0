"""Light/dark theme mode — UI state owned by the app, never persisted."""

from __future__ import annotations

from enum import StrEnum

from ticklist.config.constants import THEME_DARK, THEME_LIGHT


class ThemeMode(StrEnum):
    LIGHT = THEME_LIGHT
    DARK = THEME_DARK

    def toggled(self) -> ThemeMode:
        return ThemeMode.LIGHT if self is ThemeMode.DARK else ThemeMode.DARK

    @property
    def textual_theme(self) -> str:
        """Name of the built-in Textual theme for this mode."""
        return "textual-dark" if self is ThemeMode.DARK else "textual-light"

    @property
    def toggle_label(self) -> str:
        """Button label offering the other mode."""
        return "☀ Light" if self is ThemeMode.DARK else "☾ Dark"
