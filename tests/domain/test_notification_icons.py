import pytest

from synergysphere.domain.entities import Notification, NotificationType, notification_icon


@pytest.mark.parametrize(
    ("notification_type", "icon"),
    [
        ("task_assigned", "📋"),
        ("task_completed", "✅"),
        ("project_invite", "👥"),
        ("deadline_reminder", "⏰"),
        ("project_update", "📊"),
        ("comment_added", "💬"),
        ("info", "🔔"),
        ("other", "🔔"),
        ("from_a_newer_release", "🔔"),
    ],
)
def test_notification_icon(notification_type, icon):
    assert notification_icon(notification_type) == icon


def test_notification_exposes_its_icon():
    notification = Notification(
        id=None,
        user_id=1,
        title="Project Invitation",
        message="",
        type=NotificationType.PROJECT_INVITE,
    )

    assert notification.icon == "👥"
    assert notification.read is False
    assert notification.data == {}
