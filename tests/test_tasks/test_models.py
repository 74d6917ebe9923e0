"""Tests for the Task model and id generation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ticklist.tasks.models import RemovedTask, Task, generate_id


def test_defaults():
    task = Task(title="Buy milk")
    assert task.done is False
    assert isinstance(task.id, int)
    assert task.id > 0


def test_generated_ids_strictly_increase():
    ids = [generate_id() for _ in range(200)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_id_is_millisecond_timestamp():
    # 2023-11-14 in ms; anything generated now must be later
    assert generate_id() > 1_700_000_000_000


def test_equality_is_by_fields():
    assert Task(id=5, title="x") == Task(id=5, title="x", done=False)
    assert Task(id=5, title="x") != Task(id=5, title="x", done=True)


def test_assignment_is_validated():
    task = Task(id=1, title="x")
    with pytest.raises(ValidationError):
        task.done = "definitely"  # type: ignore[assignment]


def test_removed_task_unpacks():
    task = Task(id=9, title="gone")
    removed = RemovedTask(task, 2)
    got_task, index = removed
    assert got_task is task
    assert index == 2
