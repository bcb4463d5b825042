"""Domain entity representing a comment left on a task."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TaskComment:
    id: int | None
    task_id: int
    user_id: int
    content: str
    created_at: datetime | None = None
    author_name: str | None = None


__all__ = ["TaskComment"]
