"""Pydantic models for the task list."""

from __future__ import annotations

import time
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

_last_id = 0


def generate_id() -> int:
    """Millisecond timestamp, bumped so ids never repeat within a process."""
    global _last_id
    candidate = time.time_ns() // 1_000_000
    if candidate <= _last_id:
        candidate = _last_id + 1
    _last_id = candidate
    return candidate


class Task(BaseModel):
    """A single to-do item."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(default_factory=generate_id)
    title: str
    done: bool = False


class RemovedTask(NamedTuple):
    """A task taken out of the list, with the position it was taken from."""

    task: Task
    index: int
