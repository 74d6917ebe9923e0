"""Pydantic models for configuration sub-sections."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from ticklist.config.constants import (
    DEFAULT_TASKS_KEY,
    LOG_FILE,
    LOG_LEVELS,
    PREFS_FILE,
    THEME_DARK,
    THEME_LIGHT,
)


class StorageConfig(BaseModel):
    """Where the task list is persisted."""

    prefs_file: str = str(PREFS_FILE)
    key: str = DEFAULT_TASKS_KEY

    @field_validator("key")
    @classmethod
    def key_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("storage key must not be blank")
        return v.strip()


class UIConfig(BaseModel):
    """Presentation settings."""

    theme: str = THEME_LIGHT  # light | dark

    @field_validator("theme")
    @classmethod
    def known_theme(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in (THEME_LIGHT, THEME_DARK):
            raise ValueError(f"theme must be '{THEME_LIGHT}' or '{THEME_DARK}', got {v!r}")
        return v


class LoggingConfig(BaseModel):
    """Log file settings."""

    level: str = "INFO"
    file: str = str(LOG_FILE)

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return v
