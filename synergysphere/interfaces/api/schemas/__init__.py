from .activity import ActivityRead
from .comment import CommentCreate, CommentRead
from .message import MessageCreate, MessageRead
from .notification import (
    NotificationFeedRead,
    NotificationMarkReadRequest,
    NotificationRead,
    UnreadCountRead,
)
from .project import (
    MemberInvite,
    MemberRoleUpdate,
    ProjectCreate,
    ProjectMemberRead,
    ProjectRead,
    ProjectUpdate,
)
from .task import TaskAssign, TaskCreate, TaskRead
from .user import UserRead

__all__ = [
    "ActivityRead",
    "CommentCreate",
    "CommentRead",
    "MemberInvite",
    "MemberRoleUpdate",
    "MessageCreate",
    "MessageRead",
    "NotificationFeedRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "ProjectCreate",
    "ProjectMemberRead",
    "ProjectRead",
    "ProjectUpdate",
    "TaskAssign",
    "TaskCreate",
    "TaskRead",
    "UnreadCountRead",
    "UserRead",
]
