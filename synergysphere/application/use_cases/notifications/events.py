"""Notifications raised as side effects of project and task actions.

Each helper is called only after the triggering action committed. Users are
never notified about something they did themselves.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from synergysphere.domain.entities import (
    Notification,
    NotificationType,
    Project,
    ProjectRole,
    Task,
    TaskComment,
    User,
)
from ..fan_out import run_fan_out

from .store import create_notification

PROJECT_INVITATION_TITLE = "Project Invitation"
TASK_ASSIGNED_TITLE = "New task assigned"
TASK_COMPLETED_TITLE = "Task completed"
TASK_COMMENT_TITLE = "New comment"
COMMENT_PREVIEW_LENGTH = 100


def invitation_message(project_name: str, role: ProjectRole | str) -> str:
    role_name = role.value if isinstance(role, ProjectRole) else role
    return f'You\'ve been invited to join "{project_name}" as a {role_name}.'


def _persist(
    session: Session,
    *,
    action: str,
    user_id: int,
    title: str,
    message: str,
    type: NotificationType,
    data: dict,
) -> Notification | None:
    return run_fan_out(
        session,
        action,
        lambda: create_notification(
            session,
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            data=data,
        ),
    )


def notify_member_invited(
    session: Session,
    *,
    project: Project,
    invitee: User,
    role: ProjectRole,
    invited_by: User,
) -> Notification | None:
    """Tell ``invitee`` they were added to ``project``."""

    if invitee.id == invited_by.id:
        return None
    return _persist(
        session,
        action="member invite",
        user_id=invitee.id,
        title=PROJECT_INVITATION_TITLE,
        message=invitation_message(project.name, role),
        type=NotificationType.PROJECT_INVITE,
        data={
            "project_id": project.id,
            "role": role.value,
            "invited_by": invited_by.id,
        },
    )


def _task_watchers(task: Task, actor: User) -> list[int]:
    recipients: list[int] = []
    for candidate in (task.created_by, task.assignee_id):
        if candidate and candidate != actor.id and candidate not in recipients:
            recipients.append(candidate)
    return recipients


def notify_task_assigned(
    session: Session,
    *,
    project: Project,
    task: Task,
    assigned_by: User,
) -> Notification | None:
    """Tell the task's assignee that the task is now theirs."""

    if task.assignee_id is None or task.assignee_id == assigned_by.id:
        return None
    return _persist(
        session,
        action="task assignment",
        user_id=task.assignee_id,
        title=TASK_ASSIGNED_TITLE,
        message=(
            f'{assigned_by.label} assigned you the task "{task.title}" '
            f'in "{project.name}".'
        ),
        type=NotificationType.TASK_ASSIGNED,
        data={"project_id": project.id, "task_id": task.id},
    )


def notify_task_completed(
    session: Session,
    *,
    project: Project,
    task: Task,
    completed_by: User,
) -> list[Notification]:
    """Tell the task creator and assignee that the task was completed."""

    delivered: list[Notification] = []
    for recipient_id in _task_watchers(task, completed_by):
        saved = _persist(
            session,
            action="task completion",
            user_id=recipient_id,
            title=TASK_COMPLETED_TITLE,
            message=(
                f'{completed_by.label} completed the task "{task.title}" '
                f'in "{project.name}".'
            ),
            type=NotificationType.TASK_COMPLETED,
            data={"project_id": project.id, "task_id": task.id},
        )
        if saved is not None:
            delivered.append(saved)
    return delivered


def notify_comment_added(
    session: Session,
    *,
    project: Project,
    task: Task,
    comment: TaskComment,
    author: User,
) -> list[Notification]:
    """Tell the task creator and assignee about a new comment."""

    preview = comment.content
    if len(preview) > COMMENT_PREVIEW_LENGTH:
        preview = preview[: COMMENT_PREVIEW_LENGTH - 3] + "..."

    delivered: list[Notification] = []
    for recipient_id in _task_watchers(task, author):
        saved = _persist(
            session,
            action="task comment",
            user_id=recipient_id,
            title=TASK_COMMENT_TITLE,
            message=f'{author.label} commented on "{task.title}": {preview}',
            type=NotificationType.COMMENT_ADDED,
            data={
                "project_id": project.id,
                "task_id": task.id,
                "comment_id": comment.id,
            },
        )
        if saved is not None:
            delivered.append(saved)
    return delivered


__all__ = [
    "COMMENT_PREVIEW_LENGTH",
    "PROJECT_INVITATION_TITLE",
    "TASK_ASSIGNED_TITLE",
    "TASK_COMMENT_TITLE",
    "TASK_COMPLETED_TITLE",
    "invitation_message",
    "notify_comment_added",
    "notify_member_invited",
    "notify_task_assigned",
    "notify_task_completed",
]
