"""ORM models used by the application infrastructure."""

from .activity import ProjectActivityModel
from .comment import TaskCommentModel
from .message import ProjectMessageModel
from .notification import NotificationModel
from .project import ProjectMemberModel, ProjectModel
from .task import TaskModel
from .user import UserModel

__all__ = [
    "NotificationModel",
    "ProjectActivityModel",
    "ProjectMemberModel",
    "ProjectMessageModel",
    "ProjectModel",
    "TaskCommentModel",
    "TaskModel",
    "UserModel",
]
