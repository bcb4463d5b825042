"""Project membership checks shared by the use cases."""

from __future__ import annotations

from sqlalchemy.orm import Session

from synergysphere.domain.entities import Project, ProjectMember
from synergysphere.domain.exceptions import NotFoundError, PermissionDeniedError
from synergysphere.infrastructure.repositories import ProjectRepository


def require_membership(
    session: Session, *, project_id: int, user_id: int
) -> tuple[Project, ProjectMember]:
    """Return the project and the caller's membership.

    Non-members get the same :class:`NotFoundError` as for a missing project.
    """

    repository = ProjectRepository(session)
    membership = repository.get_member(project_id, user_id)
    project = repository.get(project_id) if membership else None
    if membership is None or project is None:
        raise NotFoundError("Project", project_id)
    return project, membership


def require_manager(
    session: Session, *, project_id: int, user_id: int
) -> tuple[Project, ProjectMember]:
    """Like :func:`require_membership` but also demand the owner or admin role."""

    project, membership = require_membership(
        session, project_id=project_id, user_id=user_id
    )
    if not membership.role.can_manage_members:
        raise PermissionDeniedError("Only project owners and admins can do this")
    return project, membership


__all__ = ["require_manager", "require_membership"]
