"""In-memory market data provider for replay, backtests and tests."""

from datetime import datetime
from typing import Optional

from ..data.models import (
    Bar,
    DoubleProperty,
    IntegerProperty,
    SymbolSpec,
    Tick,
    Timeframe,
)
from ..errors.codes import (
    ERR_INDICATOR_UNKNOWN_SYMBOL,
    ERR_MARKET_NOT_SELECTED,
    ERR_MARKET_UNKNOWN_SYMBOL,
)
from ..utils.time import ensure_market_time
from .base import INVALID_HANDLE, MarketDataProvider
from .computed import ComputedIndicatorsMixin


class InMemoryProvider(ComputedIndicatorsMixin, MarketDataProvider):
    """
    Provider serving quotes, metadata and bars held in memory.

    Quotes are pushed with push_tick() or push_quote() and the latest one is
    returned by fetch_tick(). A symbol can be marked unavailable to simulate
    an outage: every read for it then fails with ERR_MARKET_NOT_SELECTED.
    """

    def __init__(self, name: str = "memory"):
        super().__init__(name)
        self._init_indicators()
        self.specs: dict[str, SymbolSpec] = {}
        self.ticks: dict[str, list[Tick]] = {}
        self.bars: dict[tuple[str, Timeframe], list[Bar]] = {}
        self.unavailable: set[str] = set()

    # Data loading

    def add_symbol(self, spec: SymbolSpec) -> None:
        """Register an instrument."""
        self.specs[spec.symbol] = spec
        self.ticks.setdefault(spec.symbol, [])

    def push_tick(self, symbol: str, tick: Tick) -> None:
        """Make a quote the current one for a symbol."""
        self.ticks.setdefault(symbol, []).append(tick)

    def push_quote(self, symbol: str, ask: float, bid: float, volume: int = 0,
                   time: Optional[datetime] = None) -> Tick:
        """Build and push a quote, defaulting its time to the previous quote's."""
        history = self.ticks.get(symbol) or []
        fallback = history[-1].time if history else None
        tick = Tick(ask=ask, bid=bid, volume=volume,
                    time=ensure_market_time(time, fallback))
        self.push_tick(symbol, tick)
        return tick

    def set_bars(self, symbol: str, timeframe: Timeframe, bars: list[Bar]) -> None:
        """Replace the bar history of a chart, bars in chronological order."""
        self.bars[(symbol, timeframe)] = list(bars)

    def add_bar(self, symbol: str, timeframe: Timeframe, bar: Bar) -> None:
        """Append a newly closed bar to a chart."""
        self.bars.setdefault((symbol, timeframe), []).append(bar)

    def set_available(self, symbol: str, available: bool) -> None:
        """Toggle simulated availability of a symbol."""
        if available:
            self.unavailable.discard(symbol)
        else:
            self.unavailable.add(symbol)

    # MarketDataProvider

    def _check_symbol(self, symbol: str, unknown_code: int = ERR_MARKET_UNKNOWN_SYMBOL) -> bool:
        if symbol not in self.specs:
            self.set_last_error(unknown_code)
            return False
        if symbol in self.unavailable:
            self.set_last_error(ERR_MARKET_NOT_SELECTED)
            return False
        return True

    def fetch_tick(self, symbol: str) -> Optional[Tick]:
        if not self._check_symbol(symbol):
            return None
        history = self.ticks.get(symbol)
        if not history:
            self.set_last_error(ERR_MARKET_NOT_SELECTED)
            return None
        return history[-1]

    def fetch_double(self, symbol: str, prop: DoubleProperty) -> float:
        if not self._check_symbol(symbol):
            return 0.0
        return float(getattr(self.specs[symbol], prop.value))

    def fetch_integer(self, symbol: str, prop: IntegerProperty) -> int:
        if not self._check_symbol(symbol):
            return 0
        return int(getattr(self.specs[symbol], prop.value))

    def obtain_indicator_handle(self, symbol: str, timeframe: Timeframe,
                                name: str, args: tuple) -> int:
        if not self._check_symbol(symbol, ERR_INDICATOR_UNKNOWN_SYMBOL):
            return INVALID_HANDLE
        return super().obtain_indicator_handle(symbol, timeframe, name, args)

    def _fetch_bars(self, symbol: str, timeframe: Timeframe, count: int) -> Optional[list[Bar]]:
        if not self._check_symbol(symbol, ERR_INDICATOR_UNKNOWN_SYMBOL):
            return None
        bars = self.bars.get((symbol, timeframe))
        if not bars:
            return None
        return bars[-count:]
