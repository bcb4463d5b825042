"""Domain entity representing a message posted to a project thread."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ProjectMessage:
    """Message exchanged by project members; replies point at ``parent_id``."""

    id: int | None
    project_id: int
    user_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None
    author_name: str | None = None


__all__ = ["ProjectMessage"]
