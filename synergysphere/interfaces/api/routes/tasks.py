"""Endpoints acting on a single task."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from synergysphere.application.use_cases.comments import list_comments, post_comment
from synergysphere.application.use_cases.tasks import assign_task, complete_task
from synergysphere.domain.entities import TaskComment, User
from synergysphere.infrastructure.database import get_db
from synergysphere.interfaces.api.dependencies import get_current_user
from synergysphere.interfaces.api.schemas import (
    CommentCreate,
    CommentRead,
    TaskAssign,
    TaskRead,
)

from .projects import task_to_schema

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _comment_to_schema(comment: TaskComment) -> CommentRead:
    return CommentRead.model_validate(comment)


@router.put("/{task_id}/assignee", response_model=TaskRead)
def assign_task_endpoint(
    task_id: int,
    payload: TaskAssign,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    """Reassign a task; the new assignee receives a notification."""

    task = assign_task(db, task_id=task_id, actor=current_user, assignee_id=payload.assignee_id)
    return task_to_schema(task)


@router.post("/{task_id}/complete", response_model=TaskRead)
def complete_task_endpoint(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    return task_to_schema(complete_task(db, task_id=task_id, actor=current_user))


@router.get("/{task_id}/comments", response_model=list[CommentRead])
def read_comments(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[CommentRead]:
    comments = list_comments(db, task_id=task_id, user=current_user)
    return [_comment_to_schema(comment) for comment in comments]


@router.post(
    "/{task_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def post_comment_endpoint(
    task_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CommentRead:
    """Comment on a task; its creator and assignee are notified."""

    comment = post_comment(db, task_id=task_id, author=current_user, content=payload.content)
    return _comment_to_schema(comment)


__all__ = ["router"]
