"""Pydantic schemas for project messages."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    content: str = Field(..., min_length=1)
    parent_id: int | None = None


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    user_id: int
    author_name: str | None = None
    content: str
    parent_id: int | None = None
    created_at: datetime


__all__ = ["MessageCreate", "MessageRead"]
