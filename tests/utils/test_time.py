"""
Tests for time utilities.

Verifies epoch conversions from the terminal and the market time fallback
used when a quote arrives without a timestamp.
"""

from datetime import datetime, timezone, timedelta
from unittest.mock import patch

from mtdata.utils.time import ensure_market_time, from_epoch_millis, from_epoch_seconds


class TestEpochConversion:
    """Test terminal timestamp conversion."""

    def test_from_epoch_seconds(self):
        assert from_epoch_seconds(1515585600) == datetime(2018, 1, 10, 12, 0, 0, tzinfo=timezone.utc)

    def test_from_epoch_millis_keeps_fraction(self):
        result = from_epoch_millis(1515585600500)
        assert result == datetime(2018, 1, 10, 12, 0, 0, 500000, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc


class TestEnsureMarketTime:
    """Test ensure_market_time function."""

    def test_prefers_market_time(self):
        """Should use market time when available, ignoring fallback."""
        market_ts = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        fallback_ts = market_ts - timedelta(minutes=5)
        assert ensure_market_time(market_ts, fallback_ts) == market_ts

    def test_naive_market_time_is_utc(self):
        naive = datetime(2023, 1, 1, 12, 0, 0)
        result = ensure_market_time(naive)
        assert result == datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_uses_fallback_when_market_time_missing(self):
        fallback_ts = datetime(2023, 1, 1, 11, 55, 0, tzinfo=timezone.utc)
        assert ensure_market_time(None, fallback_ts) == fallback_ts

    def test_uses_wall_clock_as_last_resort(self):
        """Should use wall-clock time when no other time is available."""
        with patch('mtdata.utils.time.datetime') as mock_datetime:
            mock_now = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
            mock_datetime.now.return_value = mock_now

            result = ensure_market_time(None, None)
            assert result == mock_now
            mock_datetime.now.assert_called_once_with(timezone.utc)
