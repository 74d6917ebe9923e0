"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from ticklist.core.session import TaskSession
from ticklist.storage.backends import JsonFileStorage, MemoryStorage
from ticklist.storage.gateway import PersistenceGateway
from ticklist.tasks.models import Task


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    return tmp_path / "prefs.json"


@pytest.fixture
def file_gateway(prefs_path: Path) -> PersistenceGateway:
    return PersistenceGateway(JsonFileStorage(prefs_path))


@pytest.fixture
def memory_gateway() -> PersistenceGateway:
    return PersistenceGateway(MemoryStorage())


@pytest.fixture
def abc_tasks() -> list[Task]:
    return [
        Task(id=1, title="A"),
        Task(id=2, title="B", done=True),
        Task(id=3, title="C"),
    ]


@pytest.fixture
def session(file_gateway: PersistenceGateway) -> TaskSession:
    return TaskSession.open(file_gateway)


@pytest.fixture
def test_settings(tmp_path: Path):
    """Settings pointing every path into tmp_path."""
    from ticklist.config.models import LoggingConfig, StorageConfig
    from ticklist.config.settings import Settings

    return Settings(
        storage=StorageConfig(prefs_file=str(tmp_path / "data" / "prefs.json")),
        logging=LoggingConfig(file=str(tmp_path / "logs" / "ticklist.log")),
    )
