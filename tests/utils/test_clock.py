from datetime import datetime, timedelta, timezone

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from synergysphere.utils import ensure_app_naive_datetime, ensure_app_timezone, parse_timezone


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("", timedelta(0)),
        (None, timedelta(0)),
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("utc+2", timedelta(hours=2)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_parse_timezone_offsets(name, offset):
    assert parse_timezone(name).utcoffset(datetime(2024, 1, 1)) == offset


def test_parse_timezone_accepts_iana_names():
    try:
        ZoneInfo("Europe/Berlin")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")

    assert parse_timezone("Europe/Berlin").utcoffset(datetime(2024, 1, 15)) == timedelta(hours=1)


def test_naive_values_round_trip_through_storage_form():
    aware = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)

    stored = ensure_app_naive_datetime(aware)

    assert stored.tzinfo is None
    assert ensure_app_timezone(stored) == aware
    assert ensure_app_timezone(None) is None
