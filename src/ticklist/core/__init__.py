"""Application core: a task store bound to its persistence."""

from ticklist.core.session import TaskSession, open_session

__all__ = ["TaskSession", "open_session"]
