"""Per-user storage of notifications and their read state."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from synergysphere.domain.entities import Notification, NotificationType
from synergysphere.infrastructure.models import NotificationModel
from synergysphere.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .base import commit_or_raise, is_storable_id


class NotificationRepository:
    """Provide the per-user operations over :class:`Notification` objects.

    Every query filters by ``user_id``; callers cannot reach another user's
    rows through this class.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        model.user_id = notification.user_id
        model.title = notification.title
        model.message = notification.message
        model.type = NotificationType(notification.type).value
        model.data = dict(notification.data or {})
        model.read = False
        model.read_at = None
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        commit_or_raise(self.session, operation="notification create")
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self._owned(user_id).order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_with_unread_count(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> tuple[list[Notification], int]:
        """Return the newest notifications and the unread total in one statement.

        The unread total is a window aggregate over the whole owned set, so it
        is computed before ``limit`` truncates the rows and from the same
        snapshot the rows come from.
        """

        unread_total = func.sum(
            case((NotificationModel.read.is_(False), 1), else_=0)
        ).over()
        query = (
            self.session.query(NotificationModel, unread_total.label("unread_total"))
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        rows = query.all()
        if not rows:
            return [], 0
        return [self._to_entity(model) for model, _ in rows], int(rows[0][1] or 0)

    def count_unread(self, user_id: int) -> int:
        return (
            self._owned(user_id)
            .filter(NotificationModel.read.is_(False))
            .with_entities(func.count(NotificationModel.id))
            .scalar()
            or 0
        )

    def list_unread_ids(self, user_id: int) -> list[int]:
        rows = (
            self._owned(user_id)
            .filter(NotificationModel.read.is_(False))
            .with_entities(NotificationModel.id)
            .all()
        )
        return [row[0] for row in rows]

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        if not is_storable_id(notification_id):
            return None
        model = self._owned(user_id).filter(NotificationModel.id == notification_id).first()
        return self._to_entity(model) if model else None

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        """Flip ``read`` to true for the owned, still unread ids.

        Returns the number of rows that actually changed. Foreign, unknown,
        repeated and already read ids are ignored.
        """

        ids = sorted(
            {
                notification_id
                for notification_id in notification_ids
                if is_storable_id(notification_id)
            }
        )
        if not ids:
            return 0
        updated = (
            self._owned(user_id)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.read.is_(False),
            )
            .update(
                {
                    NotificationModel.read: True,
                    NotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    ),
                },
                synchronize_session=False,
            )
        )
        commit_or_raise(self.session, operation="notification mark read")
        return updated

    def delete(self, notification_id: int, *, user_id: int) -> bool:
        """Delete an owned notification.

        Returns ``False`` when no row matched, whether the id does not exist
        or belongs to someone else.
        """

        if not is_storable_id(notification_id):
            return False
        deleted = (
            self._owned(user_id)
            .filter(NotificationModel.id == notification_id)
            .delete(synchronize_session=False)
        )
        commit_or_raise(self.session, operation="notification delete")
        return bool(deleted)

    def _owned(self, user_id: int):
        return self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        try:
            notification_type = NotificationType(model.type)
        except ValueError:
            notification_type = NotificationType.OTHER
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=notification_type,
            data=dict(model.data or {}),
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
