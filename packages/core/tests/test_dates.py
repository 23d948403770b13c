from __future__ import annotations

import time
from datetime import datetime, timezone

import pytest

from datefeed_core.dates import format_feed_date, local_date


def test_fixed_instant_today_and_yesterday() -> None:
    instant = datetime(2025, 5, 9, 2, 0, tzinfo=timezone.utc)
    assert format_feed_date(instant) == "20250509"
    assert format_feed_date(instant, days_back=1) == "20250508"


def test_utc_evening_is_already_next_day_in_singapore() -> None:
    instant = datetime(2025, 5, 9, 17, 0, tzinfo=timezone.utc)
    assert format_feed_date(instant, "Asia/Singapore") == "20250510"
    assert format_feed_date(instant, "Asia/Singapore", days_back=1) == "20250509"


def test_yesterday_crosses_month_and_year_boundaries() -> None:
    assert format_feed_date(datetime(2025, 3, 1, 0, 30, tzinfo=timezone.utc), days_back=1) == "20250228"
    assert format_feed_date(datetime(2025, 1, 1, 0, 0, tzinfo=timezone.utc), days_back=1) == "20241231"


def test_negative_offset_zone_steps_back_one_day() -> None:
    instant = datetime(2025, 5, 9, 2, 0, tzinfo=timezone.utc)
    assert format_feed_date(instant, "America/Chicago") == "20250508"
    assert format_feed_date(instant, "America/Chicago", days_back=1) == "20250507"


def test_host_timezone_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    if not hasattr(time, "tzset"):
        pytest.skip("tzset not available on this platform")
    monkeypatch.setenv("TZ", "America/Los_Angeles")
    time.tzset()
    try:
        instant = datetime(2025, 5, 9, 2, 0, tzinfo=timezone.utc)
        assert format_feed_date(instant) == "20250509"
        assert format_feed_date(instant, days_back=1) == "20250508"
    finally:
        monkeypatch.undo()
        time.tzset()


def test_naive_instant_is_rejected() -> None:
    with pytest.raises(ValueError):
        local_date(datetime(2025, 5, 9, 2, 0))


def test_unknown_timezone_is_rejected() -> None:
    with pytest.raises(ValueError):
        format_feed_date(datetime(2025, 5, 9, tzinfo=timezone.utc), "Mars/Olympus_Mons")


def test_negative_days_back_is_rejected() -> None:
    with pytest.raises(ValueError):
        format_feed_date(datetime(2025, 5, 9, tzinfo=timezone.utc), days_back=-1)
