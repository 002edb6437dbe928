"""
Unit tests for calendar_backend.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from calendar_backend.utils.datetime_utils import ensure_utc, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc - no config needed"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


def test_utc_now_is_aware():
    now = utc_now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
