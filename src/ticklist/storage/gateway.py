"""Load/save boundary between the task list and key-value storage."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ticklist.config.constants import CORRUPT_SUFFIX, DEFAULT_TASKS_KEY
from ticklist.errors import TaskDecodeError
from ticklist.storage.backends import KeyValueStorage
from ticklist.storage.codec import decode, encode
from ticklist.tasks.models import Task

logger = logging.getLogger("ticklist.storage.gateway")


class PersistenceGateway:
    """Encode the whole task list under one fixed key, and read it back.

    Persistence problems never escape: ``save`` reports them as ``False``
    and ``load`` falls back to an empty list. Undecodable data is copied to
    ``<key>.corrupt`` before the empty list is returned, so the next save
    does not destroy it.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_TASKS_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def backup_key(self) -> str:
        return self._key + CORRUPT_SUFFIX

    def save(self, tasks: Sequence[Task]) -> bool:
        """Overwrite the stored list with ``tasks``. Returns True on success."""
        try:
            self._storage.set_string(self._key, encode(tasks))
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("Failed to save %d task(s): %s", len(tasks), exc)
            return False
        logger.debug("Saved %d task(s) under %r", len(tasks), self._key)
        return True

    def load(self) -> list[Task]:
        """Read the stored list; empty on first run or unreadable data."""
        try:
            raw = self._storage.get_string(self._key)
        except OSError as exc:
            logger.warning("Failed to read tasks: %s", exc)
            return []
        if raw is None:
            return []
        try:
            tasks = decode(raw)
        except TaskDecodeError as exc:
            logger.warning("Stored tasks are unreadable, starting empty: %s", exc)
            self._quarantine(raw)
            return []
        logger.debug("Loaded %d task(s) from %r", len(tasks), self._key)
        return tasks

    def _quarantine(self, raw: str) -> None:
        """Copy ``raw`` to the first free backup key.

        Earlier backups are kept: the first goes to ``<key>.corrupt``, later
        ones to ``<key>.corrupt.1``, ``<key>.corrupt.2`` and so on. A value
        that is already backed up is not copied again.
        """
        try:
            backup_key = self.backup_key
            attempt = 0
            existing = self._storage.get_string(backup_key)
            while existing is not None:
                if existing == raw:
                    return
                attempt += 1
                backup_key = f"{self.backup_key}.{attempt}"
                existing = self._storage.get_string(backup_key)
            self._storage.set_string(backup_key, raw)
        except OSError as exc:
            logger.warning("Could not back up unreadable tasks: %s", exc)
            return
        logger.info("Unreadable tasks copied to %r", backup_key)
