"""Endpoints and websocket handler for user notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from synergysphere.application.use_cases.notifications import (
    delete_notification,
    get_notification_feed,
    get_unread_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
)
from synergysphere.config import Settings
from synergysphere.domain.entities import Notification, User
from synergysphere.infrastructure.database import SessionLocal, get_db
from synergysphere.infrastructure.notifications import notification_manager
from synergysphere.interfaces.api.dependencies import (
    get_app_settings,
    get_current_user,
    resolve_current_user,
)
from synergysphere.interfaces.api.schemas import (
    NotificationFeedRead,
    NotificationMarkReadRequest,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        title=notification.title,
        message=notification.message,
        type=notification.type.value,
        icon=notification.icon,
        data=notification.data or {},
        read=notification.read,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


@router.get("/", response_model=list[NotificationRead])
def read_notifications(
    limit: int | None = Query(None, ge=1, le=500, description="Maximum entries to return"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the authenticated user's notifications, newest first."""

    notifications = list_notifications(db, user_id=current_user.id, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCountRead:
    return UnreadCountRead(unread_count=get_unread_count(db, user_id=current_user.id))


@router.get("/feed", response_model=NotificationFeedRead)
def read_notification_feed(
    limit: int | None = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
) -> NotificationFeedRead:
    """Return the newest notifications together with a consistent unread count."""

    feed = get_notification_feed(
        db,
        user_id=current_user.id,
        limit=limit or settings.notification_list_limit,
    )
    return NotificationFeedRead(
        notifications=[_notification_to_schema(n) for n in feed.notifications],
        unread_count=feed.unread_count,
    )


@router.post("/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    """Mark the given notifications as read; unknown or foreign ids are ignored."""

    mark_notifications_read(
        db, user_id=current_user.id, notification_ids=payload.unique_ids()
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/read-all", status_code=status.HTTP_204_NO_CONTENT)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    mark_all_notifications_read(db, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    delete_notification(db, user_id=current_user.id, notification_id=notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream refresh signals to the authenticated user.

    Messages pushed here never carry notification data; clients re-fetch on
    every signal. Clients may send ``ping`` or ``ack`` (mark ids read).
    """

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    ack_session = SessionLocal()
                    try:
                        mark_notifications_read(
                            ack_session,
                            user_id=user.id,
                            notification_ids=[i for i in ids if type(i) is int],
                        )
                    finally:
                        ack_session.close()
                continue
    except WebSocketDisconnect:
        notification_manager.disconnect(user.id, websocket)
    except Exception:
        logger.exception("Realtime connection for user %s failed", user.id)
        notification_manager.disconnect(user.id, websocket)
        raise
