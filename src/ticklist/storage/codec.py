"""JSON text encoding of a task list.

The encoded form is a compact array of ``{"id", "title", "done"}`` objects
in list order::

    [{"id":1700000000000,"title":"Buy milk","done":false}]
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ticklist.errors import TaskDecodeError
from ticklist.tasks.models import Task

_task_list = TypeAdapter(list[Task])


class _TaskRecord(BaseModel):
    """A stored task: every field required, nothing else allowed."""

    model_config = ConfigDict(extra="forbid")

    id: int
    title: str
    done: bool


_record_list = TypeAdapter(list[_TaskRecord])


def encode(tasks: Sequence[Task]) -> str:
    """Serialize ``tasks`` to JSON text."""
    return _task_list.dump_json(list(tasks)).decode("utf-8")


def decode(text: str) -> list[Task]:
    """Parse JSON text produced by :func:`encode`.

    Raises :class:`TaskDecodeError` if the text is not a JSON array of
    complete task records with distinct ids.
    """
    try:
        records = _record_list.validate_json(text, strict=True)
    except ValidationError as exc:
        raise TaskDecodeError(f"cannot decode task list: {exc.error_count()} error(s)") from exc

    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise TaskDecodeError(f"cannot decode task list: duplicate id {record.id}")
        seen.add(record.id)
    return [Task(id=r.id, title=r.title, done=r.done) for r in records]
