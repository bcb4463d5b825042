"""Domain entity describing an entry of a project's activity feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class ActivityType(str, Enum):
    """Kinds of events recorded in the project activity feed."""

    TASK_CREATED = "task_created"
    TASK_COMPLETED = "task_completed"
    TASK_UPDATED = "task_updated"
    MEMBER_ADDED = "member_added"
    MEMBER_REMOVED = "member_removed"
    PROJECT_UPDATED = "project_updated"
    OTHER = "other"


DEFAULT_ACTIVITY_ICON = "📌"

ACTIVITY_ICONS: dict[ActivityType, str] = {
    ActivityType.TASK_CREATED: "✅",
    ActivityType.TASK_COMPLETED: "🎉",
    ActivityType.TASK_UPDATED: "📝",
    ActivityType.MEMBER_ADDED: "👋",
    ActivityType.MEMBER_REMOVED: "👋",
    ActivityType.PROJECT_UPDATED: "⚙️",
}

_MESSAGE_TEMPLATES: dict[ActivityType, str] = {
    ActivityType.TASK_CREATED: '{actor} created task "{task_name}"',
    ActivityType.TASK_COMPLETED: '{actor} completed task "{task_name}"',
    ActivityType.TASK_UPDATED: '{actor} updated task "{task_name}"',
    ActivityType.MEMBER_ADDED: "{actor} joined the project",
    ActivityType.MEMBER_REMOVED: "{actor} left the project",
    ActivityType.PROJECT_UPDATED: "{actor} updated the project",
}
_FALLBACK_TEMPLATE = "{actor} performed an action"


@dataclass
class Activity:
    """Append-only, team-visible record of something that happened in a project."""

    id: int | None
    project_id: int
    user_id: int
    activity_type: ActivityType | str
    activity_data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    actor_name: str | None = None

    @property
    def icon(self) -> str:
        return activity_icon(self.activity_type)


def activity_icon(activity_type: ActivityType | str | None) -> str:
    """Return the feed icon for ``activity_type``."""

    try:
        resolved = ActivityType(activity_type)
    except ValueError:
        return DEFAULT_ACTIVITY_ICON
    return ACTIVITY_ICONS.get(resolved, DEFAULT_ACTIVITY_ICON)


def render_activity_message(
    activity_type: ActivityType | str | None,
    activity_data: Mapping[str, Any] | None,
    actor_name: str,
) -> str:
    """Return the sentence shown in the feed for a single activity.

    ``task_name`` is read from ``activity_data`` for task events; a missing
    value renders as an empty quoted name rather than failing.
    """

    try:
        template = _MESSAGE_TEMPLATES.get(ActivityType(activity_type), _FALLBACK_TEMPLATE)
    except ValueError:
        template = _FALLBACK_TEMPLATE

    data = activity_data or {}
    task_name = data.get("task_name")
    return template.format(actor=actor_name, task_name="" if task_name is None else task_name)


def render_activity(activity: Activity, actor_name: str | None = None) -> str:
    """Render ``activity`` using ``actor_name`` or the name resolved by the store."""

    name = actor_name or activity.actor_name or "Someone"
    return render_activity_message(activity.activity_type, activity.activity_data, name)


__all__ = [
    "ACTIVITY_ICONS",
    "Activity",
    "ActivityType",
    "DEFAULT_ACTIVITY_ICON",
    "activity_icon",
    "render_activity",
    "render_activity_message",
]
