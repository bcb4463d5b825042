"""Tests for the notification use cases and the read-state rules."""

from __future__ import annotations

import pytest

from synergysphere.application.use_cases.notifications import (
    create_notification,
    delete_notification,
    get_notification_feed,
    get_unread_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
)
from synergysphere.domain.entities import NotificationType
from synergysphere.domain.exceptions import NotFoundError, ValidationFailure
from synergysphere.infrastructure.repositories import NotificationRepository


def _notify(session, user, title="Heads up", **kwargs):
    return create_notification(
        session, user_id=user.id, title=title, message="body", **kwargs
    )


def test_create_validates_input(session, make_user):
    user = make_user("ana@example.com")

    with pytest.raises(ValidationFailure):
        create_notification(session, user_id=None, title="x", message="")
    with pytest.raises(ValidationFailure):
        _notify(session, user, type="carrier_pigeon")
    with pytest.raises(ValidationFailure):
        _notify(session, user, title="   ")
    with pytest.raises(ValidationFailure):
        _notify(session, user, title="x" * 121)
    with pytest.raises(NotFoundError):
        create_notification(session, user_id=999, title="x", message="")


def test_duplicates_are_allowed(session, make_user):
    user = make_user("ana@example.com")

    first = _notify(session, user, type=NotificationType.TASK_ASSIGNED)
    second = _notify(session, user, type=NotificationType.TASK_ASSIGNED)

    assert first.id != second.id
    assert get_unread_count(session, user_id=user.id) == 2


def test_mark_all_only_marks_what_was_unread_when_called(session, make_user, monkeypatch):
    user = make_user("ana@example.com")
    seen = [_notify(session, user, title=f"seen {i}") for i in range(3)]
    original = NotificationRepository.list_unread_ids
    late = {}

    def capture_then_race(self, user_id):
        ids = original(self, user_id)
        late["notification"] = _notify(session, user, title="arrived late")
        return ids

    monkeypatch.setattr(NotificationRepository, "list_unread_ids", capture_then_race)

    changed = mark_all_notifications_read(session, user_id=user.id)

    assert changed == len(seen)
    assert get_unread_count(session, user_id=user.id) == 1
    [unread] = [n for n in list_notifications(session, user_id=user.id) if not n.read]
    assert unread.id == late["notification"].id


def test_mark_all_with_nothing_unread(session, make_user):
    user = make_user("ana@example.com")

    assert mark_all_notifications_read(session, user_id=user.id) == 0


def test_mark_read_never_touches_other_users(session, make_user):
    ana = make_user("ana@example.com")
    bob = make_user("bob@example.com")
    anas = _notify(session, ana)

    assert mark_notifications_read(session, user_id=bob.id, notification_ids=[anas.id]) == 0
    assert get_unread_count(session, user_id=ana.id) == 1


def test_delete_of_foreign_and_missing_ids_look_the_same(session, make_user):
    ana = make_user("ana@example.com")
    bob = make_user("bob@example.com")
    anas = _notify(session, ana)

    with pytest.raises(NotFoundError) as foreign:
        delete_notification(session, user_id=bob.id, notification_id=anas.id)
    with pytest.raises(NotFoundError) as missing:
        delete_notification(session, user_id=bob.id, notification_id=anas.id + 100)

    assert type(foreign.value) is type(missing.value)
    assert foreign.value.resource == missing.value.resource == "Notification"
    assert get_unread_count(session, user_id=ana.id) == 1


def test_deleting_an_unread_notification_lowers_the_count(session, make_user):
    user = make_user("ana@example.com")
    keep = _notify(session, user)
    drop = _notify(session, user)

    delete_notification(session, user_id=user.id, notification_id=drop.id)

    assert get_unread_count(session, user_id=user.id) == 1
    assert [n.id for n in list_notifications(session, user_id=user.id)] == [keep.id]


def test_feed_reports_list_and_count_together(session, make_user):
    user = make_user("ana@example.com")
    created = [_notify(session, user, title=f"n{i}") for i in range(4)]
    mark_notifications_read(session, user_id=user.id, notification_ids=[created[0].id])

    feed = get_notification_feed(session, user_id=user.id, limit=2)

    assert [n.id for n in feed.notifications] == [created[3].id, created[2].id]
    assert feed.unread_count == 3
    assert feed.unread_count == get_unread_count(session, user_id=user.id)
