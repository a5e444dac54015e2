"""Pydantic model for a single todo item."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A todo item owned by a TaskStore."""

    id: int = Field(gt=0)
    description: str = Field(min_length=1)
    completed: bool = False
    due_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
