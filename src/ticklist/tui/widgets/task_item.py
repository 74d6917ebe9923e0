"""TaskItem — one row of the task list."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Label, ListItem

from ticklist.tasks.models import Task


def task_label(task: Task) -> Text:
    """Checkbox glyph plus title, struck through once done."""
    text = Text()
    if task.done:
        text.append("[x] ", style="green")
        text.append(task.title, style="strike dim")
    else:
        text.append("[ ] ")
        text.append(task.title)
    return text


class TaskItem(ListItem):
    DEFAULT_CSS = """
    TaskItem {
        height: auto;
        padding: 0 1;
    }
    TaskItem.-done Label {
        color: $text-muted;
    }
    """

    def __init__(self, task: Task) -> None:
        super().__init__(Label(task_label(task)), id=f"task-{task.id}")
        self.task_id = task.id
        self.set_class(task.done, "-done")
