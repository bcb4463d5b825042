"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from synergysphere.domain.entities import User
from synergysphere.domain.exceptions import ConflictError
from synergysphere.infrastructure.models import UserModel
from synergysphere.utils import ensure_app_timezone

from .base import commit_or_raise, is_storable_id


class UserRepository:
    """Provide lookup and creation of user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        if not is_storable_id(user_id):
            return None
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        if self.get_by_email(user.email) is not None:
            raise ConflictError(f"A user with email '{user.email}' already exists")
        model = UserModel(
            email=user.email.strip().lower(),
            display_name=(user.display_name or "").strip() or None,
        )
        self.session.add(model)
        commit_or_raise(self.session, operation="user create")
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            display_name=model.display_name,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
