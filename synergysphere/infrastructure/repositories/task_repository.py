"""Persistence layer for project tasks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from synergysphere.domain.entities import Task, TaskPriority, TaskStatus
from synergysphere.infrastructure.models import TaskModel
from synergysphere.utils import ensure_app_naive_datetime, ensure_app_timezone

from .base import commit_or_raise, is_storable_id


class TaskRepository:
    """Provide CRUD operations for :class:`Task` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, task_id: int) -> Task | None:
        if not is_storable_id(task_id):
            return None
        model = self.session.get(TaskModel, task_id)
        return self._to_entity(model) if model else None

    def list_for_project(self, project_id: int) -> Sequence[Task]:
        query = (
            self.session.query(TaskModel)
            .filter(TaskModel.project_id == project_id)
            .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, task: Task) -> Task:
        model = TaskModel()
        model.project_id = task.project_id
        model.created_by = task.created_by
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        commit_or_raise(self.session, operation="task create")
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, task: Task) -> Task:
        model = self.session.get(TaskModel, task.id)
        if model is None:
            msg = f"Task with id {task.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, task)
        commit_or_raise(self.session, operation="task update")
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.priority = TaskPriority(task.priority).value
        model.status = TaskStatus(task.status).value
        model.deadline = ensure_app_naive_datetime(task.deadline)
        model.tags = list(task.tags or [])
        model.assignee_id = task.assignee_id
        model.completed_at = ensure_app_naive_datetime(task.completed_at)

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            project_id=model.project_id,
            title=model.title,
            created_by=model.created_by,
            description=model.description,
            priority=TaskPriority(model.priority),
            status=TaskStatus(model.status),
            deadline=ensure_app_timezone(model.deadline),
            tags=list(model.tags or []),
            assignee_id=model.assignee_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            completed_at=ensure_app_timezone(model.completed_at),
        )


__all__ = ["TaskRepository"]
