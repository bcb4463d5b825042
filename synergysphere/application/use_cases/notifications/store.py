"""Use cases over a single user's notifications.

Every operation receives the acting ``user_id`` explicitly and only ever
touches rows owned by that user. Mutations push a refresh signal so other
open surfaces of the same user re-fetch.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from synergysphere.domain.entities import Notification, NotificationType
from synergysphere.domain.exceptions import NotFoundError, ValidationFailure
from synergysphere.infrastructure.notifications import signal_notifications_changed
from synergysphere.infrastructure.repositories import (
    NotificationRepository,
    UserRepository,
)
from synergysphere.utils import now_in_app_timezone

_TITLE_MAX_LENGTH = 120


@dataclass(frozen=True)
class NotificationFeed:
    """Notifications and unread total read from the same snapshot."""

    notifications: list[Notification]
    unread_count: int


def create_notification(
    session: Session,
    *,
    user_id: int | None,
    title: str,
    message: str,
    type: NotificationType | str = NotificationType.INFO,
    data: Mapping[str, Any] | None = None,
) -> Notification:
    """Persist a new unread notification for ``user_id``."""

    if user_id is None:
        raise ValidationFailure("A recipient is required", field="user_id")
    try:
        notification_type = NotificationType(type)
    except ValueError as exc:
        raise ValidationFailure(f"Unknown notification type '{type}'", field="type") from exc
    title = (title or "").strip()
    if not title:
        raise ValidationFailure("Notification title cannot be empty", field="title")
    if len(title) > _TITLE_MAX_LENGTH:
        raise ValidationFailure(
            f"Notification title cannot exceed {_TITLE_MAX_LENGTH} characters",
            field="title",
        )
    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User", user_id)

    saved = NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=user_id,
            title=title,
            message=message or "",
            type=notification_type,
            data=dict(data or {}),
            read=False,
            created_at=now_in_app_timezone(),
        )
    )
    signal_notifications_changed(user_id)
    return saved


def list_notifications(
    session: Session, *, user_id: int, limit: int | None = None
) -> list[Notification]:
    """Return ``user_id``'s notifications, newest first."""

    return list(NotificationRepository(session).list_for_user(user_id, limit=limit))


def get_unread_count(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def get_notification_feed(
    session: Session, *, user_id: int, limit: int | None = None
) -> NotificationFeed:
    """Return the list and the unread count computed from one statement."""

    notifications, unread = NotificationRepository(session).list_with_unread_count(
        user_id, limit=limit
    )
    return NotificationFeed(notifications=notifications, unread_count=unread)


def mark_notifications_read(
    session: Session, *, user_id: int, notification_ids: Iterable[int]
) -> int:
    """Mark the given ids read; ids the user does not own are ignored.

    Calling this again with the same ids changes nothing. Returns how many
    notifications went from unread to read.
    """

    changed = NotificationRepository(session).mark_as_read(
        notification_ids, user_id=user_id
    )
    if changed:
        signal_notifications_changed(user_id)
    return changed


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    """Mark read exactly the notifications that are unread right now.

    The unread ids are captured first; anything created after that capture
    stays unread.
    """

    repository = NotificationRepository(session)
    unread_ids = repository.list_unread_ids(user_id)
    if not unread_ids:
        return 0
    return mark_notifications_read(session, user_id=user_id, notification_ids=unread_ids)


def delete_notification(session: Session, *, user_id: int, notification_id: int) -> None:
    """Delete one owned notification or raise :class:`NotFoundError`."""

    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise NotFoundError("Notification", notification_id)
    signal_notifications_changed(user_id)


__all__ = [
    "NotificationFeed",
    "create_notification",
    "delete_notification",
    "get_notification_feed",
    "get_unread_count",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notifications_read",
]
