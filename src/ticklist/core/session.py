"""TaskSession — apply a list operation, then persist the result."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ticklist.storage.backends import JsonFileStorage, KeyValueStorage, MemoryStorage
from ticklist.storage.gateway import PersistenceGateway
from ticklist.tasks.models import RemovedTask, Task
from ticklist.tasks.store import TaskStore

if TYPE_CHECKING:
    from ticklist.config.settings import Settings

logger = logging.getLogger("ticklist.core.session")


class TaskSession:
    """The single owner of a task list for one UI.

    Forwards each operation to the :class:`TaskStore` and writes the new list
    through the :class:`PersistenceGateway` whenever it changed. A failed
    write is logged and remembered in :attr:`last_save_ok`; the in-memory
    list is never rolled back.
    """

    def __init__(self, gateway: PersistenceGateway, store: TaskStore | None = None) -> None:
        self._gateway = gateway
        self._store = store if store is not None else TaskStore()
        self.last_save_ok: bool | None = None

    @classmethod
    def open(cls, gateway: PersistenceGateway) -> TaskSession:
        """Load the persisted list once and seed a store with it."""
        return cls(gateway, TaskStore(gateway.load()))

    # -- Queries ---------------------------------------------------------------

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def gateway(self) -> PersistenceGateway:
        return self._gateway

    @property
    def tasks(self) -> list[Task]:
        return self._store.tasks

    def __len__(self) -> int:
        return len(self._store)

    # -- Operations ------------------------------------------------------------

    def add(self, raw_text: str) -> list[Task]:
        before = len(self._store)
        tasks = self._store.add(raw_text)
        if len(tasks) != before:
            self._persist()
        return tasks

    def toggle_done(self, index: int) -> list[Task]:
        return self._persist_after(self._store.toggle_done(index))

    def edit_title(self, index: int, new_text: str) -> list[Task]:
        old_title = self._store.get(index).title
        tasks = self._store.edit_title(index, new_text)
        if tasks[index].title != old_title:
            self._persist()
        return tasks

    def remove(self, index: int) -> RemovedTask:
        removed = self._store.remove(index)
        self._persist()
        return removed

    def undo_remove(self, task: Task, at_index: int) -> list[Task]:
        return self._persist_after(self._store.undo_remove(task, at_index))

    def undo_last(self) -> Task | None:
        restored = self._store.undo_last()
        if restored is not None:
            self._persist()
        return restored

    def reorder(self, old_index: int, new_index: int) -> list[Task]:
        return self._persist_after(self._store.reorder(old_index, new_index))

    def move_to_slot(self, old_index: int, slot: int) -> list[Task]:
        return self._persist_after(self._store.move_to_slot(old_index, slot))

    def move_up(self, index: int) -> list[Task]:
        return self._persist_after(self._store.move_up(index))

    def move_down(self, index: int) -> list[Task]:
        return self._persist_after(self._store.move_down(index))

    def clear_done(self) -> int:
        """Remove every completed task. Returns how many were removed."""
        removed = self._store.clear_done()
        if removed:
            self._persist()
        return removed

    # -- Persistence -----------------------------------------------------------

    def _persist_after(self, tasks: list[Task]) -> list[Task]:
        self._persist()
        return tasks

    def _persist(self) -> None:
        self.last_save_ok = self._gateway.save(self._store.tasks)
        if not self.last_save_ok:
            logger.error("Task list kept in memory only; latest change not saved")


def open_session(
    settings: Settings | None = None,
    prefs_file: Path | None = None,
    ephemeral: bool = False,
) -> TaskSession:
    """Build a session from settings (or an explicit prefs file)."""
    from ticklist.config.settings import get_settings

    settings = settings or get_settings()
    storage: KeyValueStorage
    if ephemeral:
        storage = MemoryStorage()
    else:
        storage = JsonFileStorage(prefs_file or settings.prefs_path)
    return TaskSession.open(PersistenceGateway(storage, key=settings.storage.key))
