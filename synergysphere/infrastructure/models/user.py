"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, Integer, String

from synergysphere.infrastructure.database import Base
from synergysphere.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    display_name = Column(String(120), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
