"""
Canonical data models for quotes, bars and instrument metadata.

Prices are floats, matching the platform's double precision quotes.
"""

import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

# Value returned for an indicator or metadata read that produced no data.
EMPTY_VALUE: float = sys.float_info.max

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Timeframe(int, Enum):
    """Chart timeframes, valued in minutes."""
    M1 = 1
    M5 = 5
    M15 = 15
    M30 = 30
    H1 = 60
    H4 = 240
    D1 = 1440
    W1 = 10080
    MN1 = 43200

    @classmethod
    def from_name(cls, name: str) -> "Timeframe":
        """Look up a timeframe by name, e.g. 'H1'."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown timeframe: {name}") from None


class OrderType(int, Enum):
    """Order direction."""
    BUY = 0
    SELL = 1


class DoubleProperty(str, Enum):
    """Floating point instrument properties, valued by platform field name."""
    POINT = "point"
    TRADE_TICK_VALUE = "trade_tick_value"
    TRADE_TICK_VALUE_PROFIT = "trade_tick_value_profit"
    TRADE_TICK_VALUE_LOSS = "trade_tick_value_loss"
    TRADE_TICK_SIZE = "trade_tick_size"
    TRADE_CONTRACT_SIZE = "trade_contract_size"
    VOLUME_MIN = "volume_min"
    VOLUME_MAX = "volume_max"
    VOLUME_STEP = "volume_step"
    MARGIN_INITIAL = "margin_initial"
    MARGIN_MAINTENANCE = "margin_maintenance"


class IntegerProperty(str, Enum):
    """Integer instrument properties, valued by platform field name."""
    DIGITS = "digits"
    SPREAD = "spread"
    TRADE_FREEZE_LEVEL = "trade_freeze_level"
    TRADE_STOPS_LEVEL = "trade_stops_level"


@dataclass(frozen=True)
class Tick:
    """One observed quote."""
    ask: float
    bid: float
    volume: int
    time: datetime      # UTC market timestamp

    @classmethod
    def empty(cls) -> "Tick":
        """The quote held before any successful fetch."""
        return cls(ask=0.0, bid=0.0, volume=0, time=EPOCH)


@dataclass(frozen=True)
class Bar:
    """OHLCV bar with a UTC open timestamp."""
    ts: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def median_price(self) -> float:
        """(high + low) / 2"""
        return (self.high + self.low) / 2.0


@dataclass(frozen=True)
class SymbolSpec:
    """Static instrument metadata as reported by the platform."""
    symbol: str
    digits: int
    point: float
    spread: int = 0
    trade_tick_value: float = 1.0
    trade_tick_value_profit: float = 1.0
    trade_tick_value_loss: float = 1.0
    trade_tick_size: float = 0.0
    trade_contract_size: float = 100000.0
    volume_min: float = 0.01
    volume_max: float = 100.0
    volume_step: float = 0.01
    trade_freeze_level: int = 0
    trade_stops_level: int = 0
    margin_initial: float = 0.0
    margin_maintenance: float = 0.0
