"""Integration tests for the notification endpoints and websocket."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from synergysphere.application.use_cases.notifications import create_notification  # noqa: E402


def _seed(session, user, count: int) -> list[int]:
    return [
        create_notification(
            session, user_id=user.id, title=f"Note {i}", message="body", type="task_assigned"
        ).id
        for i in range(count)
    ]


def test_requires_authentication(client):
    assert client.get("/notifications/").status_code == 401
    response = client.get(
        "/notifications/unread-count", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


def test_list_count_and_feed(client, session, make_user, auth_headers):
    ana = make_user("ana@example.com", "Ana")
    ids = _seed(session, ana, 3)
    headers = auth_headers(ana)

    listed = client.get("/notifications/", headers=headers)
    assert listed.status_code == 200
    body = listed.json()
    assert [item["id"] for item in body] == list(reversed(ids))
    assert body[0]["icon"] == "📋"
    assert body[0]["read"] is False
    assert body[0]["read_at"] is None

    count = client.get("/notifications/unread-count", headers=headers)
    assert count.json() == {"unread_count": 3}

    feed = client.get("/notifications/feed", params={"limit": 1}, headers=headers).json()
    assert len(feed["notifications"]) == 1
    assert feed["unread_count"] == 3


def test_mark_read_is_idempotent(client, session, make_user, auth_headers):
    ana = make_user("ana@example.com")
    ids = _seed(session, ana, 2)
    headers = auth_headers(ana)

    for _ in range(2):
        response = client.post("/notifications/read", json={"ids": [ids[0], ids[0]]}, headers=headers)
        assert response.status_code == 204

    assert client.get("/notifications/unread-count", headers=headers).json()["unread_count"] == 1
    assert client.post("/notifications/read", json={"ids": []}, headers=headers).status_code == 204

    assert client.post("/notifications/read-all", headers=headers).status_code == 204
    listed = client.get("/notifications/", headers=headers).json()
    assert all(item["read"] for item in listed)
    assert all(item["read_at"] for item in listed)


def test_users_cannot_touch_each_others_notifications(client, session, make_user, auth_headers):
    ana = make_user("ana@example.com")
    bob = make_user("bob@example.com")
    [anas] = _seed(session, ana, 1)
    bob_headers = auth_headers(bob)

    assert client.get("/notifications/", headers=bob_headers).json() == []
    assert client.post("/notifications/read", json={"ids": [anas]}, headers=bob_headers).status_code == 204

    foreign = client.delete(f"/notifications/{anas}", headers=bob_headers)
    missing = client.delete(f"/notifications/{anas + 50}", headers=bob_headers)
    assert foreign.status_code == missing.status_code == 404

    ana_headers = auth_headers(ana)
    assert client.get("/notifications/unread-count", headers=ana_headers).json()["unread_count"] == 1
    assert client.delete(f"/notifications/{anas}", headers=ana_headers).status_code == 204
    assert client.get("/notifications/", headers=ana_headers).json() == []



def test_ids_beyond_the_integer_range_behave_like_unknown_ids(client, session, make_user, auth_headers):
    ana = make_user("ana@example.com")
    _seed(session, ana, 1)
    headers = auth_headers(ana)
    huge = 2**70

    marked = client.post("/notifications/read", json={"ids": [huge]}, headers=headers)
    assert marked.status_code == 204
    assert client.delete(f"/notifications/{huge}", headers=headers).status_code == 404
    assert client.get("/notifications/unread-count", headers=headers).json()["unread_count"] == 1

def test_websocket_ping_and_ack(client, session, make_user, auth_headers):
    ana = make_user("ana@example.com")
    ids = _seed(session, ana, 2)
    token = auth_headers(ana)["Authorization"].split(" ", 1)[1]

    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        websocket.send_json({"type": "ack", "ids": [ids[0]]})
        websocket.send_json({"type": "ping"})
        received = [websocket.receive_json(), websocket.receive_json()]
        assert {"type": "notifications.changed"} in received
        assert {"type": "pong"} in received

    count = client.get("/notifications/unread-count", headers=auth_headers(ana)).json()
    assert count["unread_count"] == 1



def test_websocket_ack_ignores_booleans(client, session, make_user, auth_headers):
    ana = make_user("ana@example.com")
    ids = _seed(session, ana, 1)
    assert ids == [1]
    token = auth_headers(ana)["Authorization"].split(" ", 1)[1]

    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        websocket.send_json({"type": "ack", "ids": [True]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    count = client.get("/notifications/unread-count", headers=auth_headers(ana)).json()
    assert count["unread_count"] == 1

def test_websocket_receives_refresh_signal(client, make_user, auth_headers):
    ana = make_user("ana@example.com", "Ana")
    bob = make_user("bob@example.com", "Bob")
    ana_headers = auth_headers(ana)
    bob_token = auth_headers(bob)["Authorization"].split(" ", 1)[1]
    project = client.post("/projects/", json={"name": "Apollo"}, headers=ana_headers).json()

    with client.websocket_connect(f"/notifications/ws?token={bob_token}") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        response = client.post(
            f"/projects/{project['id']}/members",
            json={"email": bob.email, "role": "member"},
            headers=ana_headers,
        )
        assert response.status_code == 201

        assert websocket.receive_json() == {"type": "notifications.changed"}
        assert websocket.receive_json() == {
            "type": "activities.changed",
            "data": {"project_id": project["id"]},
        }


def test_websocket_rejects_bad_tokens(client):
    from starlette.websockets import WebSocketDisconnect

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/notifications/ws?token=garbage") as websocket:
            websocket.receive_json()
