"""Exception types shared across ticklist."""

from __future__ import annotations


class TicklistError(Exception):
    """Base class for all ticklist errors."""


class InvalidIndexError(TicklistError, IndexError):
    """An operation was addressed at a position outside the task list."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for {length} task(s)")
        self.index = index
        self.length = length


class TaskDecodeError(TicklistError, ValueError):
    """Persisted text could not be decoded into a task list."""


class StorageError(TicklistError, OSError):
    """The key-value storage backend could not be read or written."""
