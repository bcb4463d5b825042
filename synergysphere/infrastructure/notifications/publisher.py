"""Push payload-free refresh signals to websocket subscribers.

A signal only tells a presentation surface that something changed; the
surface then re-fetches the list and unread count like a manual refresh.
Signals are best effort and never authoritative.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Set

from anyio import from_thread

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)

NOTIFICATIONS_CHANGED = "notifications.changed"
ACTIVITIES_CHANGED = "activities.changed"


class RefreshSignalPublisher:
    """Schedule refresh signals for delivery to connected users."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def notifications_changed(self, user_id: int | None) -> None:
        """Tell ``user_id``'s surfaces to re-fetch their notifications."""

        if not user_id:
            return
        self._schedule_send(user_id, {"type": NOTIFICATIONS_CHANGED})

    def activities_changed(self, user_ids: Iterable[int], *, project_id: int) -> None:
        """Tell project members that the activity feed of ``project_id`` grew."""

        seen: Set[int] = set()
        for user_id in user_ids:
            if not user_id or user_id in seen:
                continue
            seen.add(user_id)
            self._schedule_send(
                user_id,
                {"type": ACTIVITIES_CHANGED, "data": {"project_id": project_id}},
            )

    def _schedule_send(self, user_id: int, message: dict[str, Any]) -> None:
        if not self._manager.connection_count(user_id):
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(self._manager.send_to_user, user_id, message)
            except RuntimeError:
                # Called outside of an AnyIO worker thread (scripts, tests).
                logger.debug("No event loop available to signal user %s", user_id)
        else:
            loop.create_task(self._manager.send_to_user(user_id, message))


refresh_signal_publisher = RefreshSignalPublisher(notification_manager)


def signal_notifications_changed(user_id: int | None) -> None:
    """Public helper that delegates to the shared publisher instance."""

    refresh_signal_publisher.notifications_changed(user_id)


def signal_activities_changed(user_ids: Iterable[int], *, project_id: int) -> None:
    """Public helper that delegates to the shared publisher instance."""

    refresh_signal_publisher.activities_changed(user_ids, project_id=project_id)


__all__ = [
    "ACTIVITIES_CHANGED",
    "NOTIFICATIONS_CHANGED",
    "RefreshSignalPublisher",
    "refresh_signal_publisher",
    "signal_activities_changed",
    "signal_notifications_changed",
]
