"""Pydantic schemas for task comments."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    task_id: int
    user_id: int
    author_name: str | None = None
    content: str
    created_at: datetime


__all__ = ["CommentCreate", "CommentRead"]
