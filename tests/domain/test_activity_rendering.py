"""Tests for the activity feed sentences and icons."""

import pytest

from synergysphere.domain.entities import (
    Activity,
    ActivityType,
    activity_icon,
    render_activity,
    render_activity_message,
)


@pytest.mark.parametrize(
    ("activity_type", "expected"),
    [
        ("task_created", 'Ana created task "Ship it"'),
        ("task_completed", 'Ana completed task "Ship it"'),
        ("task_updated", 'Ana updated task "Ship it"'),
        ("member_added", "Ana joined the project"),
        ("member_removed", "Ana left the project"),
        ("project_updated", "Ana updated the project"),
        ("other", "Ana performed an action"),
        ("something_new", "Ana performed an action"),
    ],
)
def test_render_activity_message(activity_type, expected):
    assert render_activity_message(activity_type, {"task_name": "Ship it"}, "Ana") == expected


def test_missing_task_name_renders_empty_quotes():
    assert render_activity_message(ActivityType.TASK_CREATED, {}, "Ana") == 'Ana created task ""'
    assert render_activity_message(ActivityType.TASK_UPDATED, None, "Ana") == 'Ana updated task ""'


def test_render_activity_prefers_explicit_actor_name():
    activity = Activity(
        id=1,
        project_id=1,
        user_id=7,
        activity_type=ActivityType.MEMBER_ADDED,
        actor_name="bob@example.com",
    )

    assert render_activity(activity) == "bob@example.com joined the project"
    assert render_activity(activity, "Bob") == "Bob joined the project"

    activity.actor_name = None
    assert render_activity(activity) == "Someone joined the project"


@pytest.mark.parametrize(
    ("activity_type", "icon"),
    [
        ("task_created", "✅"),
        ("task_completed", "🎉"),
        ("task_updated", "📝"),
        ("member_added", "👋"),
        ("member_removed", "👋"),
        ("project_updated", "⚙️"),
        ("other", "📌"),
        ("unheard_of", "📌"),
        (None, "📌"),
    ],
)
def test_activity_icon(activity_type, icon):
    assert activity_icon(activity_type) == icon
