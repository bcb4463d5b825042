"""SQLAlchemy model for project tasks."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from synergysphere.infrastructure.database import Base
from synergysphere.utils import now_in_app_naive_datetime

from .types import json_type


class TaskModel(Base):
    """Database representation of a task."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(String(20), nullable=False, default="medium")
    status = Column(String(20), nullable=False, default="todo")
    deadline = Column(DateTime(), nullable=True)
    tags = Column(json_type, nullable=False, default=list)
    assignee_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)
    completed_at = Column(DateTime(), nullable=True)


__all__ = ["TaskModel"]
