"""Use cases for creating, assigning and completing tasks."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from synergysphere.domain.entities import (
    Project,
    ProjectMember,
    Task,
    TaskPriority,
    TaskStatus,
    User,
)
from synergysphere.domain.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    ValidationFailure,
)
from synergysphere.infrastructure.repositories import ProjectRepository, TaskRepository
from synergysphere.utils import now_in_app_timezone

from .access import require_membership
from .activities import record_task_completed, record_task_created, record_task_updated
from .notifications import notify_task_assigned, notify_task_completed


def _normalize_tags(tags: list[str] | None) -> list[str]:
    normalized: list[str] = []
    for tag in tags or []:
        cleaned = tag.strip()
        if cleaned and cleaned not in normalized:
            normalized.append(cleaned)
    return normalized


def _ensure_assignee_is_member(session: Session, project_id: int, assignee_id: int | None) -> None:
    if assignee_id is None:
        return
    if ProjectRepository(session).get_member(project_id, assignee_id) is None:
        raise ValidationFailure(
            "Tasks can only be assigned to project members", field="assignee_id"
        )


def load_task(session: Session, task_id: int, user: User) -> tuple[Task, Project, ProjectMember]:
    task = TaskRepository(session).get(task_id)
    if task is None:
        raise NotFoundError("Task", task_id)
    try:
        project, membership = require_membership(
            session, project_id=task.project_id, user_id=user.id
        )
    except NotFoundError as exc:
        raise NotFoundError("Task", task_id) from exc
    return task, project, membership


def list_tasks(session: Session, *, project_id: int, user: User) -> list[Task]:
    require_membership(session, project_id=project_id, user_id=user.id)
    return list(TaskRepository(session).list_for_project(project_id))


def create_task(
    session: Session,
    *,
    project_id: int,
    actor: User,
    title: str,
    description: str | None = None,
    priority: TaskPriority | str = TaskPriority.MEDIUM,
    deadline: datetime | None = None,
    tags: list[str] | None = None,
    assignee_id: int | None = None,
) -> Task:
    """Create a task; an assignee other than the creator is notified."""

    project, _ = require_membership(session, project_id=project_id, user_id=actor.id)
    title = (title or "").strip()
    if not title:
        raise ValidationFailure("Task title cannot be empty", field="title")
    try:
        resolved_priority = TaskPriority(priority)
    except ValueError as exc:
        raise ValidationFailure(f"Unknown priority '{priority}'", field="priority") from exc
    _ensure_assignee_is_member(session, project.id, assignee_id)

    task = TaskRepository(session).create(
        Task(
            id=None,
            project_id=project.id,
            title=title,
            created_by=actor.id,
            description=description,
            priority=resolved_priority,
            deadline=deadline,
            tags=_normalize_tags(tags),
            assignee_id=assignee_id,
        )
    )
    record_task_created(session, task=task, actor=actor)
    notify_task_assigned(session, project=project, task=task, assigned_by=actor)
    return task


def assign_task(
    session: Session, *, task_id: int, actor: User, assignee_id: int | None
) -> Task:
    """Change the assignee of a task; clearing it is allowed."""

    task, project, _ = load_task(session, task_id, actor)
    if task.assignee_id == assignee_id:
        return task
    _ensure_assignee_is_member(session, project.id, assignee_id)

    task.assignee_id = assignee_id
    updated = TaskRepository(session).update(task)
    record_task_updated(session, task=updated, actor=actor)
    notify_task_assigned(session, project=project, task=updated, assigned_by=actor)
    return updated


def complete_task(session: Session, *, task_id: int, actor: User) -> Task:
    """Mark a task done; completing a finished task changes nothing."""

    task, project, membership = load_task(session, task_id, actor)
    allowed = (
        actor.id in (task.created_by, task.assignee_id)
        or membership.role.can_manage_members
    )
    if not allowed:
        raise PermissionDeniedError(
            "Only the assignee, the creator or a project manager can complete this task"
        )
    if task.status == TaskStatus.DONE:
        return task

    task.status = TaskStatus.DONE
    task.completed_at = now_in_app_timezone()
    updated = TaskRepository(session).update(task)
    record_task_completed(session, task=updated, actor=actor)
    notify_task_completed(session, project=project, task=updated, completed_by=actor)
    return updated


__all__ = ["assign_task", "complete_task", "create_task", "list_tasks", "load_task"]
