"""Use cases for task comments.

A new comment notifies the task creator and assignee; no activity is logged.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from synergysphere.domain.entities import TaskComment, User
from synergysphere.domain.exceptions import ValidationFailure
from synergysphere.infrastructure.repositories import TaskCommentRepository

from .notifications import notify_comment_added
from .tasks import load_task

logger = logging.getLogger(__name__)

_MAX_CONTENT_LENGTH = 2000


def post_comment(
    session: Session, *, task_id: int, author: User, content: str
) -> TaskComment:
    task, project, _ = load_task(session, task_id, author)
    content = (content or "").strip()
    if not content:
        raise ValidationFailure("Comment cannot be empty", field="content")
    if len(content) > _MAX_CONTENT_LENGTH:
        raise ValidationFailure(
            f"Comments cannot exceed {_MAX_CONTENT_LENGTH} characters", field="content"
        )

    comment = TaskCommentRepository(session).create(
        TaskComment(id=None, task_id=task.id, user_id=author.id, content=content)
    )
    logger.info("User %s commented on task %s", author.id, task.id)
    notify_comment_added(session, project=project, task=task, comment=comment, author=author)
    return comment


def list_comments(session: Session, *, task_id: int, user: User) -> list[TaskComment]:
    """Return the task's comments oldest first."""

    task, _, _ = load_task(session, task_id, user)
    return list(TaskCommentRepository(session).list_for_task(task.id))


__all__ = ["list_comments", "post_comment"]
