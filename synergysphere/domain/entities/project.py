"""Domain entities for projects and their membership."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ProjectRole(str, Enum):
    """Role a member holds inside a project."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"

    @property
    def can_manage_members(self) -> bool:
        return self in (ProjectRole.OWNER, ProjectRole.ADMIN)


@dataclass
class Project:
    """A container of tasks and messages shared by a team."""

    id: int | None
    name: str
    description: str | None
    owner_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ProjectMember:
    """Membership of a user inside a project."""

    id: int | None
    project_id: int
    user_id: int
    role: ProjectRole
    joined_at: datetime | None = None


__all__ = ["Project", "ProjectMember", "ProjectRole"]
