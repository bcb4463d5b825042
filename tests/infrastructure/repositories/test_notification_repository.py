"""Tests for the per-user notification repository."""

from __future__ import annotations

from datetime import timedelta

import pytest

from synergysphere.domain.entities import Notification, NotificationType
from synergysphere.domain.exceptions import StoreError
from synergysphere.infrastructure.models import NotificationModel
from synergysphere.infrastructure.repositories import NotificationRepository
from synergysphere.utils import now_in_app_timezone


def _add(repository: NotificationRepository, user_id: int, title: str, **overrides):
    return repository.create(
        Notification(
            id=None,
            user_id=user_id,
            title=title,
            message=f"{title} body",
            type=overrides.pop("type", NotificationType.INFO),
            **overrides,
        )
    )


def test_list_is_newest_first_with_id_tiebreak(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)
    moment = now_in_app_timezone()

    older = _add(repository, user.id, "older", created_at=moment - timedelta(minutes=5))
    first_tie = _add(repository, user.id, "tie one", created_at=moment)
    second_tie = _add(repository, user.id, "tie two", created_at=moment)

    listed = repository.list_for_user(user.id)

    assert [n.id for n in listed] == [second_tie.id, first_tie.id, older.id]


def test_created_notifications_start_unread(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)

    saved = _add(repository, user.id, "hello", data={"project_id": 3})

    assert saved.id is not None
    assert saved.read is False
    assert saved.read_at is None
    assert saved.data == {"project_id": 3}
    assert saved.created_at is not None


def test_unread_count_matches_list(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)
    created = [_add(repository, user.id, f"n{i}") for i in range(5)]

    repository.mark_as_read([created[0].id, created[3].id], user_id=user.id)

    listed = repository.list_for_user(user.id, limit=None)
    assert repository.count_unread(user.id) == sum(1 for n in listed if not n.read) == 3


def test_mark_as_read_is_idempotent_and_monotone(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)
    saved = _add(repository, user.id, "ping")

    assert repository.mark_as_read([saved.id, saved.id], user_id=user.id) == 1
    first_read_at = repository.get_for_user(saved.id, user_id=user.id).read_at

    assert repository.mark_as_read([saved.id], user_id=user.id) == 0
    assert repository.mark_as_read([], user_id=user.id) == 0

    reloaded = repository.get_for_user(saved.id, user_id=user.id)
    assert reloaded.read is True
    assert reloaded.read_at == first_read_at


def test_foreign_ids_are_ignored(session, make_user):
    ana = make_user("ana@example.com")
    bob = make_user("bob@example.com")
    repository = NotificationRepository(session)
    anas = _add(repository, ana.id, "for ana")

    assert repository.mark_as_read([anas.id, 9999], user_id=bob.id) == 0
    assert repository.delete(anas.id, user_id=bob.id) is False
    assert repository.get_for_user(anas.id, user_id=bob.id) is None

    still_there = repository.get_for_user(anas.id, user_id=ana.id)
    assert still_there is not None
    assert still_there.read is False



def test_ids_outside_the_integer_column_range_are_unknown(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)
    kept = _add(repository, user.id, "kept")
    huge = 2**70

    assert repository.mark_as_read([huge, -huge], user_id=user.id) == 0
    assert repository.get_for_user(huge, user_id=user.id) is None
    assert repository.delete(huge, user_id=user.id) is False
    assert repository.get_for_user(kept.id, user_id=user.id).read is False


def test_booleans_are_not_notification_ids(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)
    first = _add(repository, user.id, "first")
    assert first.id == 1

    assert repository.mark_as_read([True], user_id=user.id) == 0
    assert repository.get_for_user(first.id, user_id=user.id).read is False

def test_delete_removes_only_the_owned_row(session, make_user):
    user = make_user("ana@example.com")
    repository = NotificationRepository(session)
    keep = _add(repository, user.id, "keep")
    drop = _add(repository, user.id, "drop")

    assert repository.delete(drop.id, user_id=user.id) is True
    assert repository.delete(drop.id, user_id=user.id) is False
    assert [n.id for n in repository.list_for_user(user.id)] == [keep.id]


def test_list_with_unread_count_counts_beyond_the_limit(session, make_user):
    user = make_user("ana@example.com")
    other = make_user("bob@example.com")
    repository = NotificationRepository(session)
    created = [_add(repository, user.id, f"n{i}") for i in range(5)]
    _add(repository, other.id, "not yours")
    repository.mark_as_read([created[-1].id], user_id=user.id)

    notifications, unread = repository.list_with_unread_count(user.id, limit=2)

    assert [n.id for n in notifications] == [created[4].id, created[3].id]
    assert unread == 4


def test_list_with_unread_count_for_empty_inbox(session, make_user):
    user = make_user("ana@example.com")

    assert NotificationRepository(session).list_with_unread_count(user.id, limit=5) == ([], 0)


def test_unknown_stored_type_maps_to_other(session, make_user):
    user = make_user("ana@example.com")
    session.add(
        NotificationModel(user_id=user.id, title="legacy", message="", type="retired_kind")
    )
    session.commit()

    [notification] = NotificationRepository(session).list_for_user(user.id)

    assert notification.type is NotificationType.OTHER
    assert notification.icon == "🔔"


def test_failed_commit_raises_store_error(session, make_user, monkeypatch):
    from sqlalchemy.exc import OperationalError

    user = make_user("ana@example.com")
    repository = NotificationRepository(session)

    def broken_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(session, "commit", broken_commit)

    with pytest.raises(StoreError):
        _add(repository, user.id, "lost")

    monkeypatch.undo()
    assert repository.list_for_user(user.id) == []
