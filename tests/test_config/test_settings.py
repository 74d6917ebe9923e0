"""Tests for config system."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ticklist.config.constants import DEFAULT_TASKS_KEY, PREFS_FILE
from ticklist.config.models import LoggingConfig, StorageConfig, UIConfig
from ticklist.config.settings import Settings


@pytest.fixture
def config_file(tmp_path: Path):
    fake_config = tmp_path / "config.json"
    with patch("ticklist.config.settings.CONFIG_FILE", fake_config):
        yield fake_config


def test_default_settings(config_file, monkeypatch):
    """Settings should have sane defaults when no config file exists."""
    monkeypatch.delenv("TICKLIST_UI__THEME", raising=False)
    s = Settings()
    assert s.storage.key == DEFAULT_TASKS_KEY
    assert s.storage.prefs_file == str(PREFS_FILE)
    assert s.ui.theme == "light"
    assert s.logging.level == "INFO"


def test_settings_override():
    """Explicit values should override defaults."""
    s = Settings(ui=UIConfig(theme="dark"), storage=StorageConfig(key="todo"))
    assert s.ui.theme == "dark"
    assert s.storage.key == "todo"


def test_config_file_values_used(config_file):
    config_file.write_text(json.dumps({"ui": {"theme": "dark"}}), encoding="utf-8")
    assert Settings().ui.theme == "dark"


def test_env_overrides_config_file(config_file, monkeypatch):
    config_file.write_text(json.dumps({"ui": {"theme": "light"}}), encoding="utf-8")
    monkeypatch.setenv("TICKLIST_UI__THEME", "dark")
    assert Settings().ui.theme == "dark"


def test_nested_env_keeps_file_siblings(config_file, monkeypatch):
    config_file.write_text(
        json.dumps({"storage": {"prefs_file": "/data/mine.json"}}), encoding="utf-8"
    )
    monkeypatch.setenv("TICKLIST_STORAGE__KEY", "todo")
    s = Settings()
    assert s.storage.prefs_file == "/data/mine.json"
    assert s.storage.key == "todo"


def test_explicit_section_replaces_file_section(config_file):
    config_file.write_text(json.dumps({"storage": {"key": "from-file"}}), encoding="utf-8")
    s = Settings(storage=StorageConfig(prefs_file="/tmp/x.json"))
    assert s.storage.key == DEFAULT_TASKS_KEY


def test_corrupted_config_file_ignored(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert Settings().storage.key == DEFAULT_TASKS_KEY


def test_save_and_reload(config_file):
    s = Settings(ui=UIConfig(theme="dark"), logging=LoggingConfig(level="debug"))
    s.save()
    data = json.loads(config_file.read_text(encoding="utf-8"))
    assert data["ui"]["theme"] == "dark"
    assert data["logging"]["level"] == "DEBUG"
    assert Settings().ui.theme == "dark"


def test_config_exists(config_file):
    assert Settings.config_exists() is False
    config_file.write_text("{}", encoding="utf-8")
    assert Settings.config_exists() is True


def test_prefs_path_expands_user():
    s = Settings(storage=StorageConfig(prefs_file="~/tasks-prefs.json"))
    assert s.prefs_path == Path.home() / "tasks-prefs.json"


class TestValidation:
    def test_unknown_theme_rejected(self):
        with pytest.raises(ValidationError):
            UIConfig(theme="sepia")

    def test_theme_normalised(self):
        assert UIConfig(theme=" DARK ").theme == "dark"

    def test_blank_key_rejected(self):
        with pytest.raises(ValidationError):
            StorageConfig(key="  ")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")
