"""Use cases for threaded project messages.

Posting a message raises neither a notification nor an activity entry.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from synergysphere.domain.entities import ProjectMessage, User
from synergysphere.domain.exceptions import ValidationFailure
from synergysphere.infrastructure.repositories import ProjectMessageRepository

from .access import require_membership

logger = logging.getLogger(__name__)

_MAX_CONTENT_LENGTH = 5000


def post_message(
    session: Session,
    *,
    project_id: int,
    author: User,
    content: str,
    parent_id: int | None = None,
) -> ProjectMessage:
    project, _ = require_membership(session, project_id=project_id, user_id=author.id)
    content = (content or "").strip()
    if not content:
        raise ValidationFailure("Message content cannot be empty", field="content")
    if len(content) > _MAX_CONTENT_LENGTH:
        raise ValidationFailure(
            f"Messages cannot exceed {_MAX_CONTENT_LENGTH} characters", field="content"
        )

    repository = ProjectMessageRepository(session)
    if parent_id is not None:
        parent = repository.get(parent_id)
        if parent is None or parent.project_id != project.id:
            raise ValidationFailure(
                "Replies must target a message of the same project", field="parent_id"
            )

    saved = repository.create(
        ProjectMessage(
            id=None,
            project_id=project.id,
            user_id=author.id,
            content=content,
            parent_id=parent_id,
        )
    )
    logger.debug("Message %s posted to project %s without fan-out", saved.id, project.id)
    return saved


def list_messages(
    session: Session, *, project_id: int, user: User, limit: int = 100
) -> list[ProjectMessage]:
    """Return the latest ``limit`` messages oldest first; replies carry ``parent_id``."""

    require_membership(session, project_id=project_id, user_id=user.id)
    return list(ProjectMessageRepository(session).list_for_project(project_id, limit=limit))


__all__ = ["list_messages", "post_message"]
