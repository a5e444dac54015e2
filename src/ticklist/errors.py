"""Error types raised by the task store and the person filter."""

from __future__ import annotations


class TicklistError(Exception):
    """Base class for recoverable ticklist errors."""


class ValidationError(TicklistError):
    """Raised when caller-supplied input is rejected (e.g. an empty description)."""


class NotFoundError(TicklistError):
    """Raised when an operation references a task id that is not in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Todo with id {task_id} not found")
        self.task_id = task_id
