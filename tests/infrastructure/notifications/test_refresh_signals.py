"""Tests for the realtime connection manager and refresh publisher."""

from __future__ import annotations

import asyncio

from synergysphere.infrastructure.notifications import (
    ACTIVITIES_CHANGED,
    NOTIFICATIONS_CHANGED,
    NotificationConnectionManager,
    RefreshSignalPublisher,
)


class FakeWebSocket:
    def __init__(self, *, broken: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self.broken = broken

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self.broken:
            raise RuntimeError("socket closed")
        self.sent.append(message)


def test_broken_socket_only_drops_itself():
    manager = NotificationConnectionManager()
    healthy = FakeWebSocket()
    broken = FakeWebSocket(broken=True)

    async def scenario() -> None:
        await manager.connect(1, healthy)
        await manager.connect(1, broken)
        await manager.send_to_user(1, {"type": NOTIFICATIONS_CHANGED})

    asyncio.run(scenario())

    assert healthy.accepted and broken.accepted
    assert healthy.sent == [{"type": NOTIFICATIONS_CHANGED}]
    assert manager.connection_count(1) == 1


def test_disconnect_forgets_the_user():
    manager = NotificationConnectionManager()
    socket = FakeWebSocket()

    asyncio.run(manager.connect(5, socket))
    manager.disconnect(5, socket)
    manager.disconnect(5, socket)

    assert manager.connection_count(5) == 0


def test_signals_from_the_event_loop_carry_no_payload():
    manager = NotificationConnectionManager()
    publisher = RefreshSignalPublisher(manager)
    ana_socket = FakeWebSocket()
    bob_socket = FakeWebSocket()

    async def scenario() -> None:
        await manager.connect(1, ana_socket)
        await manager.connect(2, bob_socket)
        publisher.notifications_changed(1)
        publisher.activities_changed([1, 2, 2, 3], project_id=9)
        await asyncio.sleep(0)
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert ana_socket.sent == [
        {"type": NOTIFICATIONS_CHANGED},
        {"type": ACTIVITIES_CHANGED, "data": {"project_id": 9}},
    ]
    assert bob_socket.sent == [{"type": ACTIVITIES_CHANGED, "data": {"project_id": 9}}]


def test_signals_outside_any_loop_are_dropped_quietly():
    manager = NotificationConnectionManager()
    publisher = RefreshSignalPublisher(manager)
    socket = FakeWebSocket()
    asyncio.run(manager.connect(1, socket))

    publisher.notifications_changed(1)
    publisher.notifications_changed(None)

    assert socket.sent == []
