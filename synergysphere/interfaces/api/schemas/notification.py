"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read.

    An empty list is accepted and does nothing.
    """

    ids: list[int] = Field(default_factory=list, description="Notification identifiers")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        unique: list[int] = []
        seen: set[int] = set()
        for notification_id in self.ids:
            if notification_id in seen:
                continue
            seen.add(notification_id)
            unique.append(notification_id)
        return unique


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    title: str
    message: str
    type: str
    icon: str
    data: dict[str, Any] = Field(default_factory=dict)
    read: bool
    created_at: datetime
    read_at: datetime | None = None


class UnreadCountRead(BaseModel):
    unread_count: int


class NotificationFeedRead(BaseModel):
    """List and unread count taken from the same snapshot."""

    notifications: list[NotificationRead]
    unread_count: int


__all__ = [
    "NotificationFeedRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "UnreadCountRead",
]
