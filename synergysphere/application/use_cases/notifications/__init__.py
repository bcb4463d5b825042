"""Public helpers for reading, mutating and emitting notifications."""

from .events import (
    invitation_message,
    notify_comment_added,
    notify_member_invited,
    notify_task_assigned,
    notify_task_completed,
)
from .store import (
    NotificationFeed,
    create_notification,
    delete_notification,
    get_notification_feed,
    get_unread_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
)

__all__ = [
    "NotificationFeed",
    "create_notification",
    "delete_notification",
    "get_notification_feed",
    "get_unread_count",
    "invitation_message",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notifications_read",
    "notify_comment_added",
    "notify_member_invited",
    "notify_task_assigned",
    "notify_task_completed",
]
