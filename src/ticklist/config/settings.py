"""Central settings — loads from ~/.ticklist/config.json + environment variables."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticklist.config.constants import CONFIG_FILE, TICKLIST_HOME
from ticklist.config.models import LoggingConfig, StorageConfig, UIConfig


def _merge_over(file_data: dict, values: dict) -> dict:
    """Lay ``values`` over ``file_data``, one level into nested sections."""
    merged = dict(file_data)
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


class Settings(BaseSettings):
    """All ticklist configuration in one place.

    Priority (highest → lowest):
      1. Environment variables (TICKLIST_ prefix, ``__`` for nesting)
      2. .env file
      3. ~/.ticklist/config.json
      4. Defaults defined here
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKLIST_",
        env_nested_delimiter="__",
        env_file=(".env", str(TICKLIST_HOME / ".env")),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values: dict) -> dict:
        """Merge config.json values as defaults (explicit values still override)."""
        if CONFIG_FILE.exists():
            try:
                file_data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
                if isinstance(file_data, dict):
                    values = _merge_over(file_data, values)
            except (json.JSONDecodeError, OSError):
                pass
        return values

    @property
    def prefs_path(self) -> Path:
        """Resolved key-value storage file."""
        return Path(self.storage.prefs_file).expanduser()

    @property
    def log_path(self) -> Path:
        return Path(self.logging.file).expanduser()

    def save(self) -> None:
        """Persist current settings to config.json."""
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json")
        CONFIG_FILE.write_text(json.dumps(data, indent=2), encoding="utf-8")

    @classmethod
    def config_exists(cls) -> bool:
        return CONFIG_FILE.exists()


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
