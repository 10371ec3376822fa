"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from mtdata.data.models import Bar, SymbolSpec, Tick, Timeframe
from mtdata.providers.memory import InMemoryProvider

BASE_TIME = datetime(2018, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def make_tick(ask: float, bid: float, volume: int = 1, seconds: int = 0) -> Tick:
    """Build a tick at BASE_TIME plus an offset."""
    return Tick(ask=ask, bid=bid, volume=volume, time=BASE_TIME + timedelta(seconds=seconds))


def make_trending_bars(count: int) -> list[Bar]:
    """Bars whose median price rises by exactly 1.0 per bar."""
    return [
        Bar(ts=BASE_TIME + timedelta(hours=i), open=float(i), high=i + 1.0,
            low=i - 1.0, close=float(i), volume=100.0)
        for i in range(count)
    ]


def make_vigor_bars(count: int) -> list[Bar]:
    """Bars closing half a range above their open."""
    return [
        Bar(ts=BASE_TIME + timedelta(hours=i), open=1.0, high=2.0,
            low=1.0, close=1.5, volume=100.0)
        for i in range(count)
    ]


@pytest.fixture
def eurusd_spec() -> SymbolSpec:
    """Five-digit currency pair."""
    return SymbolSpec(
        symbol="EURUSD",
        digits=5,
        point=0.00001,
        spread=12,
        trade_tick_value=1.0,
        trade_tick_value_profit=1.0,
        trade_tick_value_loss=1.0,
        trade_tick_size=0.00001,
        trade_contract_size=100000.0,
        volume_min=0.01,
        volume_max=500.0,
        volume_step=0.01,
        trade_freeze_level=0,
        trade_stops_level=10,
        margin_initial=0.0,
        margin_maintenance=0.0,
    )


@pytest.fixture
def provider(eurusd_spec: SymbolSpec) -> InMemoryProvider:
    """Provider with EURUSD registered and H1 bars loaded."""
    provider = InMemoryProvider()
    provider.add_symbol(eurusd_spec)
    provider.set_bars("EURUSD", Timeframe.H1, make_trending_bars(60))
    return provider


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double recording structured calls."""
    return Mock()
