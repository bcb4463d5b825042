import pytest

pytest.importorskip("fastapi")

from synergysphere.domain.exceptions import (  # noqa: E402
    ConflictError,
    DomainError,
    NotFoundError,
    PermissionDeniedError,
    StoreError,
    ValidationFailure,
)
from synergysphere.interfaces.api.errors import status_for  # noqa: E402


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NotFoundError("Notification", 3), 404),
        (PermissionDeniedError(), 403),
        (ValidationFailure("bad", field="title"), 400),
        (ConflictError("taken"), 409),
        (StoreError(), 503),
        (DomainError("generic"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_not_found_detail_names_the_resource():
    assert NotFoundError("Notification", 3).detail == "Notification '3' not found"
    assert NotFoundError("Project").detail == "Project not found"


def test_store_failures_surface_as_503(client, make_user, auth_headers, monkeypatch):
    from synergysphere.infrastructure.repositories import NotificationRepository

    def unavailable(self, user_id):
        raise StoreError()

    monkeypatch.setattr(NotificationRepository, "count_unread", unavailable)
    user = make_user("ana@example.com")

    response = client.get("/notifications/unread-count", headers=auth_headers(user))

    assert response.status_code == 503
    assert response.json() == {"detail": StoreError().detail}
