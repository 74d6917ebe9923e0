"""Task list subsystem — the in-memory list and its operations."""

from ticklist.tasks.models import RemovedTask, Task
from ticklist.tasks.store import TaskStore

__all__ = ["RemovedTask", "Task", "TaskStore"]
