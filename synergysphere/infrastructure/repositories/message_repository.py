"""Persistence layer for project messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from synergysphere.domain.entities import ProjectMessage
from synergysphere.infrastructure.models import ProjectMessageModel, UserModel
from synergysphere.utils import ensure_app_timezone

from .base import commit_or_raise, is_storable_id


class ProjectMessageRepository:
    """Create and list :class:`ProjectMessage` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: ProjectMessage) -> ProjectMessage:
        model = ProjectMessageModel(
            project_id=message.project_id,
            user_id=message.user_id,
            content=message.content,
            parent_id=message.parent_id,
        )
        self.session.add(model)
        commit_or_raise(self.session, operation="message create")
        self.session.refresh(model)
        author = self.session.get(UserModel, model.user_id)
        return self._to_entity(model, author)

    def get(self, message_id: int) -> ProjectMessage | None:
        if not is_storable_id(message_id):
            return None
        model = self.session.get(ProjectMessageModel, message_id)
        if model is None:
            return None
        return self._to_entity(model, self.session.get(UserModel, model.user_id))

    def list_for_project(self, project_id: int, *, limit: int = 100) -> Sequence[ProjectMessage]:
        """Return the newest ``limit`` messages, oldest first."""

        rows = (
            self.session.query(ProjectMessageModel, UserModel)
            .join(UserModel, UserModel.id == ProjectMessageModel.user_id)
            .filter(ProjectMessageModel.project_id == project_id)
            .order_by(ProjectMessageModel.created_at.desc(), ProjectMessageModel.id.desc())
            .limit(limit)
            .all()
        )
        return [self._to_entity(model, author) for model, author in reversed(rows)]

    @staticmethod
    def _to_entity(model: ProjectMessageModel, author: UserModel | None) -> ProjectMessage:
        author_name = None
        if author is not None:
            author_name = author.display_name or author.email
        return ProjectMessage(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            content=model.content,
            parent_id=model.parent_id,
            created_at=ensure_app_timezone(model.created_at),
            author_name=author_name,
        )


__all__ = ["ProjectMessageRepository"]
