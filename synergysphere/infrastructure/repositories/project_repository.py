"""Persistence layer for projects and project membership."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from synergysphere.domain.entities import Project, ProjectMember, ProjectRole
from synergysphere.domain.exceptions import ConflictError
from synergysphere.infrastructure.models import ProjectMemberModel, ProjectModel
from synergysphere.utils import ensure_app_timezone

from .base import commit_or_raise, is_storable_id


class ProjectRepository:
    """Provide CRUD helpers for :class:`Project` and its members."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, project: Project) -> Project:
        """Persist ``project`` and register its owner as a member atomically."""

        model = ProjectModel(
            name=project.name,
            description=project.description,
            owner_id=project.owner_id,
        )
        self.session.add(model)
        self.session.flush()
        self.session.add(
            ProjectMemberModel(
                project_id=model.id,
                user_id=project.owner_id,
                role=ProjectRole.OWNER.value,
            )
        )
        commit_or_raise(self.session, operation="project create")
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, project_id: int) -> Project | None:
        if not is_storable_id(project_id):
            return None
        model = self.session.get(ProjectModel, project_id)
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> Sequence[Project]:
        query = (
            self.session.query(ProjectModel)
            .join(ProjectMemberModel, ProjectMemberModel.project_id == ProjectModel.id)
            .filter(ProjectMemberModel.user_id == user_id)
            .order_by(ProjectModel.created_at.desc(), ProjectModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def update(self, project: Project) -> Project:
        model = self.session.get(ProjectModel, project.id)
        if model is None:
            msg = f"Project with id {project.id} not found"
            raise ValueError(msg)
        model.name = project.name
        model.description = project.description
        commit_or_raise(self.session, operation="project update")
        self.session.refresh(model)
        return self._to_entity(model)

    def get_member(self, project_id: int, user_id: int) -> ProjectMember | None:
        model = self._get_member_model(project_id, user_id)
        return self._member_to_entity(model) if model else None

    def list_members(self, project_id: int) -> Sequence[ProjectMember]:
        query = (
            self.session.query(ProjectMemberModel)
            .filter(ProjectMemberModel.project_id == project_id)
            .order_by(ProjectMemberModel.joined_at, ProjectMemberModel.id)
        )
        return [self._member_to_entity(model) for model in query.all()]

    def list_member_ids(self, project_id: int) -> list[int]:
        rows = (
            self.session.query(ProjectMemberModel.user_id)
            .filter(ProjectMemberModel.project_id == project_id)
            .all()
        )
        return [row[0] for row in rows]

    def add_member(self, project_id: int, user_id: int, role: ProjectRole) -> ProjectMember:
        model = ProjectMemberModel(project_id=project_id, user_id=user_id, role=role.value)
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("User is already a member of this project.") from exc
        commit_or_raise(self.session, operation="project member add")
        self.session.refresh(model)
        return self._member_to_entity(model)

    def update_member_role(
        self, project_id: int, user_id: int, role: ProjectRole
    ) -> ProjectMember | None:
        model = self._get_member_model(project_id, user_id)
        if model is None:
            return None
        model.role = role.value
        commit_or_raise(self.session, operation="project member role update")
        self.session.refresh(model)
        return self._member_to_entity(model)

    def remove_member(self, project_id: int, user_id: int) -> bool:
        model = self._get_member_model(project_id, user_id)
        if model is None:
            return False
        self.session.delete(model)
        commit_or_raise(self.session, operation="project member remove")
        return True

    def _get_member_model(self, project_id: int, user_id: int) -> ProjectMemberModel | None:
        if not (is_storable_id(project_id) and is_storable_id(user_id)):
            return None
        return (
            self.session.query(ProjectMemberModel)
            .filter(
                ProjectMemberModel.project_id == project_id,
                ProjectMemberModel.user_id == user_id,
            )
            .first()
        )

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            name=model.name,
            description=model.description,
            owner_id=model.owner_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _member_to_entity(model: ProjectMemberModel) -> ProjectMember:
        return ProjectMember(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            role=ProjectRole(model.role),
            joined_at=ensure_app_timezone(model.joined_at),
        )


__all__ = ["ProjectRepository"]
