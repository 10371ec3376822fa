"""
Time helpers for platform timestamps.

Platform quotes carry market timestamps as epoch seconds or milliseconds.
Market timestamps are authoritative; wall-clock time is only a fallback for
quotes that arrive without one.
"""

from datetime import datetime, timezone
from typing import Optional


def from_epoch_seconds(seconds: float) -> datetime:
    """Convert epoch seconds to a UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(millis / 1000.0, tz=timezone.utc)


def ensure_market_time(market_ts: Optional[datetime], fallback_ts: Optional[datetime] = None) -> datetime:
    """
    Ensure we have a valid market time, with proper fallback hierarchy.

    Args:
        market_ts: Preferred market timestamp from data feed
        fallback_ts: Optional fallback timestamp (e.g., from last known data)

    Returns:
        Valid UTC datetime, prioritizing market time
    """
    if market_ts is not None:
        if market_ts.tzinfo is None:
            return market_ts.replace(tzinfo=timezone.utc)
        return market_ts

    if fallback_ts is not None:
        return fallback_ts

    return datetime.now(timezone.utc)
