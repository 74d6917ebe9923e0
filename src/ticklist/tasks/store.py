"""In-memory owner of the ordered task list."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ticklist.errors import InvalidIndexError
from ticklist.tasks.models import RemovedTask, Task, generate_id

logger = logging.getLogger("ticklist.tasks.store")


class TaskStore:
    """Ordered list of tasks plus the operations allowed on it.

    Every mutation returns the resulting list as a fresh ``list`` so callers
    can hand it straight to persistence. Tasks are replaced rather than
    mutated, so earlier snapshots stay as they were.

    Positions are 0-based. An out-of-range position is a caller bug and
    raises :class:`InvalidIndexError`; blank text on add/edit is a no-op.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._last_removed: RemovedTask | None = None

    # -- Queries ---------------------------------------------------------------

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the current list."""
        return list(self._tasks)

    @property
    def last_removed(self) -> RemovedTask | None:
        """The most recent removal that can still be undone."""
        return self._last_removed

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def index_of(self, task_id: int) -> int | None:
        """Position of the task with ``task_id``, or None."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def counts(self) -> tuple[int, int]:
        """Return ``(done, total)``."""
        return sum(1 for t in self._tasks if t.done), len(self._tasks)

    # -- Mutations -------------------------------------------------------------

    def add(self, raw_text: str) -> list[Task]:
        """Append a new open task. Blank text leaves the list unchanged."""
        title = raw_text.strip()
        if not title:
            return self.tasks
        task = Task(id=self._fresh_id(), title=title)
        self._tasks.append(task)
        logger.debug("Added task %d", task.id)
        return self.tasks

    def toggle_done(self, index: int) -> list[Task]:
        """Flip the completion flag of the task at ``index``."""
        self._check_index(index)
        task = self._tasks[index]
        self._tasks[index] = task.model_copy(update={"done": not task.done})
        return self.tasks

    def edit_title(self, index: int, new_text: str) -> list[Task]:
        """Replace the title at ``index``. Blank text keeps the old title."""
        self._check_index(index)
        title = new_text.strip()
        if title:
            self._tasks[index] = self._tasks[index].model_copy(update={"title": title})
        return self.tasks

    def remove(self, index: int) -> RemovedTask:
        """Take the task at ``index`` out of the list.

        The returned pair is what :meth:`undo_remove` needs to put it back.
        It is also remembered as the single pending undo for :meth:`undo_last`.
        """
        self._check_index(index)
        removed = RemovedTask(self._tasks.pop(index), index)
        self._last_removed = removed
        logger.debug("Removed task %d from position %d", removed.task.id, index)
        return removed

    def undo_remove(self, task: Task, at_index: int) -> list[Task]:
        """Re-insert a removed task, clamping ``at_index`` to ``[0, len]``."""
        if self.index_of(task.id) is not None:
            raise ValueError(f"task {task.id} is already in the list")
        position = min(max(at_index, 0), len(self._tasks))
        self._tasks.insert(position, task)
        if self._last_removed is not None and self._last_removed.task.id == task.id:
            self._last_removed = None
        return self.tasks

    def undo_last(self) -> Task | None:
        """Restore the most recent removal, if one is pending."""
        pending = self._last_removed
        if pending is None:
            return None
        self.undo_remove(pending.task, pending.index)
        return pending.task

    def reorder(self, old_index: int, new_index: int) -> list[Task]:
        """Move a task so it ends up at ``new_index``.

        Both positions refer to the list before the move. ``reorder(0, 2)``
        on ``[A, B, C]`` gives ``[B, C, A]``.
        """
        self._check_index(old_index)
        self._check_index(new_index)
        task = self._tasks.pop(old_index)
        self._tasks.insert(new_index, task)
        return self.tasks

    def move_to_slot(self, old_index: int, slot: int) -> list[Task]:
        """Move a task into the gap ``slot`` (``0..len``) as drag-and-drop reports it.

        Gap positions after the dragged task count the task itself, so they
        are shifted down by one before delegating to :meth:`reorder`.
        """
        if not 0 <= slot <= len(self._tasks):
            raise InvalidIndexError(slot, len(self._tasks) + 1)
        if slot > old_index:
            slot -= 1
        return self.reorder(old_index, slot)

    def move_up(self, index: int) -> list[Task]:
        self._check_index(index)
        if index == 0:
            return self.tasks
        return self.reorder(index, index - 1)

    def move_down(self, index: int) -> list[Task]:
        self._check_index(index)
        if index == len(self._tasks) - 1:
            return self.tasks
        return self.reorder(index, index + 1)

    def clear_done(self) -> int:
        """Drop every completed task; the pending undo is left alone."""
        remaining = [t for t in self._tasks if not t.done]
        removed = len(self._tasks) - len(remaining)
        self._tasks = remaining
        return removed

    # -- Helpers ---------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise InvalidIndexError(index, len(self._tasks))

    def _fresh_id(self) -> int:
        new_id = generate_id()
        if self._tasks:
            # Persisted ids may come from a clock that ran ahead of ours.
            new_id = max(new_id, max(t.id for t in self._tasks) + 1)
        return new_id
