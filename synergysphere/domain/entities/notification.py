"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationType(str, Enum):
    """Closed set of notification kinds; only the display icon depends on it."""

    TASK_ASSIGNED = "task_assigned"
    TASK_COMPLETED = "task_completed"
    PROJECT_INVITE = "project_invite"
    DEADLINE_REMINDER = "deadline_reminder"
    PROJECT_UPDATE = "project_update"
    COMMENT_ADDED = "comment_added"
    INFO = "info"
    OTHER = "other"


DEFAULT_NOTIFICATION_ICON = "🔔"

NOTIFICATION_ICONS: dict[NotificationType, str] = {
    NotificationType.TASK_ASSIGNED: "📋",
    NotificationType.TASK_COMPLETED: "✅",
    NotificationType.PROJECT_INVITE: "👥",
    NotificationType.DEADLINE_REMINDER: "⏰",
    NotificationType.PROJECT_UPDATE: "📊",
    NotificationType.COMMENT_ADDED: "💬",
    NotificationType.INFO: DEFAULT_NOTIFICATION_ICON,
    NotificationType.OTHER: DEFAULT_NOTIFICATION_ICON,
}


def notification_icon(notification_type: NotificationType | str | None) -> str:
    """Return the icon shown next to a notification of ``notification_type``.

    Unknown tags, including ones persisted by a newer release, get the
    default bell.
    """

    try:
        resolved = NotificationType(notification_type)
    except ValueError:
        return DEFAULT_NOTIFICATION_ICON
    return NOTIFICATION_ICONS.get(resolved, DEFAULT_NOTIFICATION_ICON)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    title: str
    message: str
    type: NotificationType
    data: dict[str, Any] = field(default_factory=dict)
    read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def icon(self) -> str:
        return notification_icon(self.type)


__all__ = [
    "DEFAULT_NOTIFICATION_ICON",
    "NOTIFICATION_ICONS",
    "Notification",
    "NotificationType",
    "notification_icon",
]
