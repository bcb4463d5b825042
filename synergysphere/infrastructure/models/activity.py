"""SQLAlchemy model for the project activity feed."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from synergysphere.infrastructure.database import Base
from synergysphere.utils import now_in_app_naive_datetime

from .types import json_type


class ProjectActivityModel(Base):
    """Append-only activity record owned by a project."""

    __tablename__ = "project_activities"
    __table_args__ = (
        Index("ix_project_activities_project_created", "project_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    activity_type = Column(String(50), nullable=False)
    activity_data = Column(json_type, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    actor = relationship("UserModel", lazy="joined")


__all__ = ["ProjectActivityModel"]
