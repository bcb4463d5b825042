"""Domain entities exposed by the application."""

from .activity import (
    Activity,
    ActivityType,
    activity_icon,
    render_activity,
    render_activity_message,
)
from .comment import TaskComment
from .message import ProjectMessage
from .notification import Notification, NotificationType, notification_icon
from .project import Project, ProjectMember, ProjectRole
from .task import Task, TaskPriority, TaskStatus
from .user import User

__all__ = [
    "Activity",
    "ActivityType",
    "activity_icon",
    "render_activity",
    "render_activity_message",
    "Notification",
    "NotificationType",
    "notification_icon",
    "Project",
    "ProjectMember",
    "ProjectMessage",
    "ProjectRole",
    "Task",
    "TaskComment",
    "TaskPriority",
    "TaskStatus",
    "User",
]
