"""Task subsystem: in-memory todo tracking."""

from ticklist.tasks.models import Task
from ticklist.tasks.store import TaskStore

__all__ = ["Task", "TaskStore"]
