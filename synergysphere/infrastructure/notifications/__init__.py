"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    ACTIVITIES_CHANGED,
    NOTIFICATIONS_CHANGED,
    RefreshSignalPublisher,
    refresh_signal_publisher,
    signal_activities_changed,
    signal_notifications_changed,
)

__all__ = [
    "ACTIVITIES_CHANGED",
    "NOTIFICATIONS_CHANGED",
    "NotificationConnectionManager",
    "notification_manager",
    "RefreshSignalPublisher",
    "refresh_signal_publisher",
    "signal_activities_changed",
    "signal_notifications_changed",
]
