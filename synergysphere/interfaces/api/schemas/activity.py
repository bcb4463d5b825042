"""Pydantic schemas for the project activity feed."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ActivityRead(BaseModel):
    id: int = Field(..., description="Activity identifier")
    project_id: int
    user_id: int = Field(..., description="User who performed the action")
    actor_name: str | None = None
    activity_type: str
    activity_data: dict[str, Any] = Field(default_factory=dict)
    message: str = Field(..., description="Human readable sentence for the feed")
    icon: str
    created_at: datetime


__all__ = ["ActivityRead"]
