"""In-memory store for todo items."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime

from ticklist.errors import NotFoundError, ValidationError
from ticklist.tasks.models import Task

logger = logging.getLogger("ticklist.tasks.store")


def _clean_description(description: str) -> str:
    text = (description or "").strip()
    if not text:
        raise ValidationError("Task description cannot be empty")
    return text


class TaskStore:
    """Create, query, and mutate todo items held in process memory.

    Tasks are kept in insertion order. Ids start at 1, are assigned on
    ``add`` and are never reused, even after the task is removed.

    Every returned ``Task`` is a copy: mutating it does not touch the store.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tasks)

    # -- Lookup ----------------------------------------------------------------

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFoundError(task_id)

    def get(self, task_id: int) -> Task:
        """Return a copy of the task with ``task_id``."""
        with self._lock:
            return self._tasks[self._index_of(task_id)].model_copy(deep=True)

    # -- CRUD ------------------------------------------------------------------

    def add(self, description: str, due_date: datetime | None = None) -> Task:
        """Add a task and return a copy of it."""
        text = _clean_description(description)
        with self._lock:
            task = Task(
                id=self._next_id,
                description=text,
                due_date=due_date if due_date is not None else datetime.now(UTC),
            )
            self._next_id += 1
            self._tasks.append(task)
        logger.debug("Added task %d: %s", task.id, task.description)
        return task.model_copy(deep=True)

    def complete(self, task_id: int) -> None:
        """Mark a task completed. Completing a completed task is a no-op."""
        with self._lock:
            self._tasks[self._index_of(task_id)].completed = True
        logger.debug("Completed task %d", task_id)

    def remove(self, task_id: int) -> None:
        """Delete a task permanently."""
        with self._lock:
            del self._tasks[self._index_of(task_id)]
        logger.debug("Removed task %d", task_id)

    def update_description(self, task_id: int, description: str) -> None:
        """Replace a task's description (trimmed)."""
        text = _clean_description(description)
        with self._lock:
            self._tasks[self._index_of(task_id)].description = text
        logger.debug("Updated description of task %d", task_id)

    def update_due_date(self, task_id: int, due_date: datetime) -> None:
        """Replace a task's due date."""
        with self._lock:
            self._tasks[self._index_of(task_id)].due_date = due_date
        logger.debug("Updated due date of task %d to %s", task_id, due_date.isoformat())

    def clear_completed(self) -> int:
        """Remove every completed task. Returns how many were removed."""
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if not t.completed]
            removed = before - len(self._tasks)
        logger.debug("Cleared %d completed tasks", removed)
        return removed

    # -- Query helpers ---------------------------------------------------------

    def list(self) -> list[Task]:
        """Return copies of all tasks in insertion order."""
        with self._lock:
            return [t.model_copy(deep=True) for t in self._tasks]

    def filter_by_status(self, completed: bool) -> list[Task]:
        """Return copies of the tasks whose ``completed`` flag matches."""
        with self._lock:
            return [t.model_copy(deep=True) for t in self._tasks if t.completed == completed]
