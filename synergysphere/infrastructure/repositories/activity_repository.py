"""Persistence layer for the project activity feed."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from synergysphere.domain.entities import Activity, ActivityType
from synergysphere.domain.exceptions import NotFoundError
from synergysphere.infrastructure.models import ProjectActivityModel, ProjectModel
from synergysphere.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .base import commit_or_raise


class ActivityRepository:
    """Append and list :class:`Activity` entries; rows are never updated."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def append(self, activity: Activity) -> Activity:
        if self.session.get(ProjectModel, activity.project_id) is None:
            raise NotFoundError("Project", activity.project_id)

        model = ProjectActivityModel()
        model.project_id = activity.project_id
        model.user_id = activity.user_id
        model.activity_type = ActivityType(activity.activity_type).value
        model.activity_data = dict(activity.activity_data or {})
        model.created_at = ensure_app_naive_datetime(
            activity.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        commit_or_raise(self.session, operation="activity append")
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_project(self, project_id: int, *, limit: int = 10) -> Sequence[Activity]:
        query = (
            self.session.query(ProjectActivityModel)
            .filter(ProjectActivityModel.project_id == project_id)
            .order_by(
                ProjectActivityModel.created_at.desc(), ProjectActivityModel.id.desc()
            )
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: ProjectActivityModel) -> Activity:
        try:
            activity_type: ActivityType | str = ActivityType(model.activity_type)
        except ValueError:
            activity_type = model.activity_type
        actor = model.actor
        actor_name = None
        if actor is not None:
            actor_name = actor.display_name or actor.email
        return Activity(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            activity_type=activity_type,
            activity_data=dict(model.activity_data or {}),
            created_at=ensure_app_timezone(model.created_at),
            actor_name=actor_name,
        )


__all__ = ["ActivityRepository"]
