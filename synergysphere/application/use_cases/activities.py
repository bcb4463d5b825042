"""Use cases for the append-only project activity feed."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from synergysphere.domain.entities import Activity, ActivityType, Project, Task, User
from synergysphere.domain.exceptions import ValidationFailure
from synergysphere.infrastructure.notifications import signal_activities_changed
from synergysphere.infrastructure.repositories import (
    ActivityRepository,
    ProjectRepository,
)
from synergysphere.utils import now_in_app_timezone

from .access import require_membership
from .fan_out import run_fan_out


def append_activity(
    session: Session,
    *,
    project_id: int,
    activity_type: ActivityType | str,
    activity_data: Mapping[str, Any] | None,
    actor_id: int,
) -> Activity:
    """Record one activity for ``project_id`` attributed to ``actor_id``."""

    try:
        resolved_type = ActivityType(activity_type)
    except ValueError as exc:
        raise ValidationFailure(
            f"Unknown activity type '{activity_type}'", field="activity_type"
        ) from exc

    saved = ActivityRepository(session).append(
        Activity(
            id=None,
            project_id=project_id,
            user_id=actor_id,
            activity_type=resolved_type,
            activity_data=dict(activity_data or {}),
            created_at=now_in_app_timezone(),
        )
    )
    member_ids = ProjectRepository(session).list_member_ids(project_id)
    signal_activities_changed(member_ids, project_id=project_id)
    return saved


def list_project_activities(
    session: Session, *, project_id: int, user_id: int, limit: int = 10
) -> list[Activity]:
    """Return the newest activities of a project the caller belongs to."""

    require_membership(session, project_id=project_id, user_id=user_id)
    return list(ActivityRepository(session).list_for_project(project_id, limit=limit))


def _record(
    session: Session,
    *,
    action: str,
    project_id: int,
    activity_type: ActivityType,
    activity_data: dict[str, Any],
    actor_id: int,
) -> Activity | None:
    return run_fan_out(
        session,
        action,
        lambda: append_activity(
            session,
            project_id=project_id,
            activity_type=activity_type,
            activity_data=activity_data,
            actor_id=actor_id,
        ),
    )


def record_member_added(
    session: Session, *, project: Project, member: User, role: str, invited_by: User
) -> Activity | None:
    return _record(
        session,
        action="member added activity",
        project_id=project.id,
        activity_type=ActivityType.MEMBER_ADDED,
        activity_data={"role": role, "invited_by": invited_by.id},
        actor_id=member.id,
    )


def record_member_removed(
    session: Session, *, project: Project, member: User, removed_by: User
) -> Activity | None:
    return _record(
        session,
        action="member removed activity",
        project_id=project.id,
        activity_type=ActivityType.MEMBER_REMOVED,
        activity_data={"removed_by": removed_by.id},
        actor_id=member.id,
    )


def _task_data(task: Task) -> dict[str, Any]:
    return {
        "task_id": task.id,
        "task_name": task.title,
        "assignee_id": task.assignee_id,
    }


def record_task_created(session: Session, *, task: Task, actor: User) -> Activity | None:
    return _record(
        session,
        action="task created activity",
        project_id=task.project_id,
        activity_type=ActivityType.TASK_CREATED,
        activity_data=_task_data(task),
        actor_id=actor.id,
    )


def record_task_updated(session: Session, *, task: Task, actor: User) -> Activity | None:
    return _record(
        session,
        action="task updated activity",
        project_id=task.project_id,
        activity_type=ActivityType.TASK_UPDATED,
        activity_data=_task_data(task),
        actor_id=actor.id,
    )


def record_task_completed(session: Session, *, task: Task, actor: User) -> Activity | None:
    return _record(
        session,
        action="task completed activity",
        project_id=task.project_id,
        activity_type=ActivityType.TASK_COMPLETED,
        activity_data=_task_data(task),
        actor_id=actor.id,
    )


def record_project_updated(
    session: Session, *, project: Project, actor: User, changes: list[str]
) -> Activity | None:
    return _record(
        session,
        action="project updated activity",
        project_id=project.id,
        activity_type=ActivityType.PROJECT_UPDATED,
        activity_data={"project_name": project.name, "changes": changes},
        actor_id=actor.id,
    )


__all__ = [
    "append_activity",
    "list_project_activities",
    "record_member_added",
    "record_member_removed",
    "record_project_updated",
    "record_task_completed",
    "record_task_created",
    "record_task_updated",
]
