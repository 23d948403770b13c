from __future__ import annotations

from datetime import date, datetime, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "Asia/Singapore"
DATE_FORMAT = "%Y%m%d"


@lru_cache
def load_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {name}") from exc


def local_date(instant: datetime, tz_name: str = DEFAULT_TIMEZONE) -> date:
    """Calendar date of ``instant`` as observed in ``tz_name``.

    The instant must be timezone-aware; the host's local zone is never consulted.
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError("instant must be timezone-aware")
    return instant.astimezone(load_timezone(tz_name)).date()


def format_feed_date(
    instant: datetime,
    tz_name: str = DEFAULT_TIMEZONE,
    days_back: int = 0,
) -> str:
    """Return ``YYYYMMDD`` for the local date of ``instant``, ``days_back`` days earlier.

    Stepping back happens on the calendar date itself, so the result does not
    depend on the zone's UTC offset or on the time of day of ``instant``.
    """
    if days_back < 0:
        raise ValueError("days_back must be >= 0")
    target = local_date(instant, tz_name) - timedelta(days=days_back)
    return target.strftime(DATE_FORMAT)
