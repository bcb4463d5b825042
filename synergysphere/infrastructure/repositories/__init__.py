"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .comment_repository import TaskCommentRepository
from .message_repository import ProjectMessageRepository
from .notification_repository import NotificationRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityRepository",
    "NotificationRepository",
    "ProjectMessageRepository",
    "ProjectRepository",
    "TaskCommentRepository",
    "TaskRepository",
    "UserRepository",
]
