"""Use cases for projects and their membership."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from synergysphere.domain.entities import Project, ProjectMember, ProjectRole, User
from synergysphere.domain.exceptions import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationFailure,
)
from synergysphere.infrastructure.repositories import ProjectRepository, UserRepository

from .access import require_manager, require_membership
from .activities import (
    record_member_added,
    record_member_removed,
    record_project_updated,
)
from .notifications import notify_member_invited

logger = logging.getLogger(__name__)


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationFailure("Project name cannot be empty", field="name")
    return cleaned


def _assignable_role(role: ProjectRole | str) -> ProjectRole:
    try:
        resolved = ProjectRole(role)
    except ValueError as exc:
        raise ValidationFailure(f"Unknown role '{role}'", field="role") from exc
    if resolved is ProjectRole.OWNER:
        raise ValidationFailure("A project can only have one owner", field="role")
    return resolved


def create_project(
    session: Session, *, owner: User, name: str, description: str | None = None
) -> Project:
    """Create a project owned by ``owner``."""

    return ProjectRepository(session).create(
        Project(id=None, name=_clean_name(name), description=description, owner_id=owner.id)
    )


def get_project(session: Session, *, project_id: int, user: User) -> Project:
    project, _ = require_membership(session, project_id=project_id, user_id=user.id)
    return project


def list_projects(session: Session, *, user: User) -> list[Project]:
    return list(ProjectRepository(session).list_for_user(user.id))


def update_project(
    session: Session,
    *,
    project_id: int,
    user: User,
    name: str | None = None,
    description: str | None = None,
) -> Project:
    """Rename or re-describe a project and log a ``project_updated`` activity."""

    project, _ = require_manager(session, project_id=project_id, user_id=user.id)
    changes: list[str] = []
    if name is not None and _clean_name(name) != project.name:
        project.name = _clean_name(name)
        changes.append("name")
    if description is not None and description != project.description:
        project.description = description
        changes.append("description")
    if not changes:
        return project

    updated = ProjectRepository(session).update(project)
    record_project_updated(session, project=updated, actor=user, changes=changes)
    return updated


def list_members(session: Session, *, project_id: int, user: User) -> list[ProjectMember]:
    require_membership(session, project_id=project_id, user_id=user.id)
    return list(ProjectRepository(session).list_members(project_id))


def invite_member(
    session: Session,
    *,
    project_id: int,
    inviter: User,
    email: str,
    role: ProjectRole | str = ProjectRole.MEMBER,
) -> ProjectMember:
    """Add the user registered under ``email`` to the project.

    On success the invitee receives a "Project Invitation" notification and
    the feed records ``member_added``.
    """

    project, _ = require_manager(session, project_id=project_id, user_id=inviter.id)
    resolved_role = _assignable_role(role)

    invitee = UserRepository(session).get_by_email(email or "")
    if invitee is None:
        raise ValidationFailure(
            "User with this email doesn't exist. They need to sign up first.",
            field="email",
        )

    repository = ProjectRepository(session)
    if repository.get_member(project.id, invitee.id) is not None:
        raise ConflictError("User is already a member of this project.")

    member = repository.add_member(project.id, invitee.id, resolved_role)
    logger.info(
        "User %s added user %s to project %s as %s",
        inviter.id,
        invitee.id,
        project.id,
        resolved_role.value,
    )

    notify_member_invited(
        session, project=project, invitee=invitee, role=resolved_role, invited_by=inviter
    )
    record_member_added(
        session, project=project, member=invitee, role=resolved_role.value, invited_by=inviter
    )
    return member


def change_member_role(
    session: Session,
    *,
    project_id: int,
    actor: User,
    member_user_id: int,
    role: ProjectRole | str,
) -> ProjectMember:
    """Switch a member between ``admin`` and ``member``; the owner is left alone."""

    project, _ = require_manager(session, project_id=project_id, user_id=actor.id)
    resolved_role = _assignable_role(role)

    repository = ProjectRepository(session)
    target = repository.get_member(project.id, member_user_id)
    if target is None:
        raise NotFoundError("Member", member_user_id)
    if target.role is ProjectRole.OWNER:
        raise ValidationFailure("The project owner's role cannot be changed", field="user_id")
    if target.role is resolved_role:
        return target

    updated = repository.update_member_role(project.id, member_user_id, resolved_role)
    if updated is None:
        raise NotFoundError("Member", member_user_id)
    logger.info(
        "User %s changed the role of user %s in project %s to %s",
        actor.id,
        member_user_id,
        project.id,
        resolved_role.value,
    )
    return updated


def remove_member(
    session: Session, *, project_id: int, actor: User, member_user_id: int
) -> None:
    """Remove a member; managers may remove others, anyone may leave."""

    project, membership = require_membership(
        session, project_id=project_id, user_id=actor.id
    )
    if member_user_id != actor.id and not membership.role.can_manage_members:
        raise PermissionDeniedError("Only project owners and admins can remove members")

    repository = ProjectRepository(session)
    target = repository.get_member(project.id, member_user_id)
    if target is None:
        raise NotFoundError("Member", member_user_id)
    if target.role is ProjectRole.OWNER:
        raise ValidationFailure("The project owner cannot be removed", field="user_id")

    member_user = UserRepository(session).get(member_user_id)
    repository.remove_member(project.id, member_user_id)
    logger.info("User %s removed user %s from project %s", actor.id, member_user_id, project.id)

    if member_user is not None:
        record_member_removed(session, project=project, member=member_user, removed_by=actor)


__all__ = [
    "change_member_role",
    "create_project",
    "get_project",
    "invite_member",
    "list_members",
    "list_projects",
    "remove_member",
    "update_project",
]
