"""Registry of open realtime sockets, keyed by user."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track every open socket of every user and push JSON frames to them.

    A user may hold several sockets at once, one per open surface.
    """

    def __init__(self) -> None:
        self._sockets: dict[int, set[WebSocket]] = {}

    async def connect(self, user_id: int, websocket: WebSocket) -> None:
        await websocket.accept()
        self._sockets.setdefault(user_id, set()).add(websocket)
        logger.debug("User %s opened a realtime socket (%s open)", user_id, self.connection_count(user_id))

    def disconnect(self, user_id: int, websocket: WebSocket) -> None:
        sockets = self._sockets.get(user_id)
        if not sockets or websocket not in sockets:
            return
        sockets.remove(websocket)
        if not sockets:
            del self._sockets[user_id]
        logger.debug("User %s closed a realtime socket", user_id)

    def connection_count(self, user_id: int) -> int:
        return len(self._sockets.get(user_id, ()))

    async def send_to_user(self, user_id: int, message: dict[str, Any]) -> None:
        """Deliver ``message`` to each socket of ``user_id``; dead sockets are forgotten."""

        stale: list[WebSocket] = []
        for websocket in tuple(self._sockets.get(user_id, ())):
            try:
                await websocket.send_json(message)
            except Exception as exc:  # pragma: no cover - closed socket
                logger.info("Dropping realtime socket of user %s: %s", user_id, exc)
                stale.append(websocket)
        for websocket in stale:
            self.disconnect(user_id, websocket)


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
