"""Persistence layer for task comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from synergysphere.domain.entities import TaskComment
from synergysphere.infrastructure.models import TaskCommentModel, UserModel
from synergysphere.utils import ensure_app_timezone

from .base import commit_or_raise


class TaskCommentRepository:
    """Create and list :class:`TaskComment` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, comment: TaskComment) -> TaskComment:
        model = TaskCommentModel(
            task_id=comment.task_id,
            user_id=comment.user_id,
            content=comment.content,
        )
        self.session.add(model)
        commit_or_raise(self.session, operation="task comment create")
        self.session.refresh(model)
        return self._to_entity(model, self.session.get(UserModel, model.user_id))

    def list_for_task(self, task_id: int) -> Sequence[TaskComment]:
        """Return every comment of the task, oldest first."""

        rows = (
            self.session.query(TaskCommentModel, UserModel)
            .join(UserModel, UserModel.id == TaskCommentModel.user_id)
            .filter(TaskCommentModel.task_id == task_id)
            .order_by(TaskCommentModel.created_at, TaskCommentModel.id)
            .all()
        )
        return [self._to_entity(model, author) for model, author in rows]

    @staticmethod
    def _to_entity(model: TaskCommentModel, author: UserModel | None) -> TaskComment:
        author_name = None
        if author is not None:
            author_name = author.display_name or author.email
        return TaskComment(
            id=model.id,
            task_id=model.task_id,
            user_id=model.user_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
            author_name=author_name,
        )


__all__ = ["TaskCommentRepository"]
