"""SQLAlchemy model for project messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text

from synergysphere.infrastructure.database import Base
from synergysphere.utils import now_in_app_naive_datetime


class ProjectMessageModel(Base):
    """Database representation of a message posted in a project thread."""

    __tablename__ = "project_messages"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    parent_id = Column(
        Integer,
        ForeignKey("project_messages.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProjectMessageModel"]
