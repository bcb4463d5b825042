"""Timestamps in the configured application timezone.

Entities carry aware datetimes. The database stores naive values expressed in
the same zone because SQLite keeps no offset.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from synergysphere.config import get_settings

_FIXED_OFFSET = re.compile(r"^(?:UTC|GMT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


def parse_timezone(name: str | None) -> tzinfo:
    """Turn an IANA name or a ``UTC±HH:MM`` offset into a ``tzinfo``.

    Blank or unknown names resolve to UTC.
    """

    name = (name or "").strip()
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _FIXED_OFFSET.match(name)
    if match is None:
        return timezone.utc
    sign, hours, minutes = match.groups()
    offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return timezone(-offset if sign == "-" else offset)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    return parse_timezone(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default: the current local time of the app without ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the app timezone; naive values are assumed local."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    aware = ensure_app_timezone(value)
    return aware.replace(tzinfo=None) if aware is not None else None
