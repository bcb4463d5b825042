"""SQLAlchemy model for task comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text

from synergysphere.infrastructure.database import Base
from synergysphere.utils import now_in_app_naive_datetime


class TaskCommentModel(Base):
    """Database representation of a comment on a task."""

    __tablename__ = "task_comments"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(
        Integer,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["TaskCommentModel"]
