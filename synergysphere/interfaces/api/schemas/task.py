"""Pydantic schemas for tasks."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    priority: str = "medium"
    deadline: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    assignee_id: int | None = None


class TaskAssign(BaseModel):
    assignee_id: int | None = None


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    title: str
    description: str | None = None
    priority: str
    status: str
    deadline: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    assignee_id: int | None = None
    created_by: int
    created_at: datetime
    updated_at: datetime | None = None
    completed_at: datetime | None = None


__all__ = ["TaskAssign", "TaskCreate", "TaskRead"]
