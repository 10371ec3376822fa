"""
Instrument facade over a market data provider.

SymbolInfo is the single accessor for one instrument's live quote, its cached
quotes and all unit conversions. Platform failures never raise out of it: a
failed quote fetch returns the last good quote, failed metadata reads return
the fallbacks documented in mtdata.symbols.properties.
"""

from typing import Any, Optional

from structlog.types import FilteringBoundLogger

from ..data.models import OrderType, Tick
from ..data.tick_history import DEFAULT_BLOCK_SIZE, TickHistory
from ..errors import HistoryAllocationError, TickFetchError
from ..errors.codes import ERR_NOT_ENOUGH_MEMORY
from ..logging.config import get_symbol_logger, log_platform_error
from ..providers.base import MarketDataProvider
from ..utils.numbers import normalize_double, round_half_away
from . import properties


class SymbolInfo:
    """
    Quote access, tick caching and unit conversions for one instrument.

    Args:
        symbol: Instrument identifier, fixed for the instance's lifetime
        provider: Market data provider to pull quotes and metadata from
        logger: Logger for platform failures; a symbol-bound structlog logger
            when omitted
        config: Merged configuration dict (see ConfigLoader)
    """

    def __init__(self, symbol: str, provider: MarketDataProvider,
                 logger: Optional[FilteringBoundLogger] = None,
                 config: Optional[dict[str, Any]] = None):
        self._symbol = symbol
        self.provider = provider
        self.logger = logger or get_symbol_logger(__name__, symbol)
        self.config = config or {}

        block_size = self.config.get("tick_history", {}).get("block_size", DEFAULT_BLOCK_SIZE)
        self.ticks = TickHistory(block_size=block_size)
        self.last_tick = Tick.empty()

    @property
    def symbol(self) -> str:
        return self._symbol

    # Quotes

    def _fetch_tick(self) -> Tick:
        self.provider.reset_last_error()
        tick = self.provider.fetch_tick(self._symbol)
        if tick is None:
            code = self.provider.last_error()
            raise TickFetchError(
                f"Cannot fetch tick for {self._symbol}",
                symbol=self._symbol, error_code=code,
            )
        return tick

    def get_tick(self) -> Tick:
        """
        Fetch the current quote and cache it.

        On failure the error is logged and the previously cached quote is
        returned unchanged, so the result may be stale.
        """
        try:
            self.last_tick = self._fetch_tick()
        except TickFetchError as e:
            if not log_platform_error(self.logger, "fetch_tick", e.error_code,
                                      {"symbol": self._symbol}):
                self.logger.error("Tick fetch returned no data", symbol=self._symbol)
        return self.last_tick

    def get_last_tick(self) -> Tick:
        """Cached quote; never touches the provider."""
        return self.last_tick

    def ask(self) -> float:
        """Current ask price (fetches a fresh quote)."""
        return self.get_tick().ask

    def bid(self) -> float:
        """Current bid price (fetches a fresh quote)."""
        return self.get_tick().bid

    def get_last_ask(self) -> float:
        return self.last_tick.ask

    def get_last_bid(self) -> float:
        return self.last_tick.bid

    def get_last_volume(self) -> int:
        return self.last_tick.volume

    def get_open_offer(self, order_type: OrderType) -> float:
        """Price an order opens at: ask for a buy, bid for a sell."""
        return self.ask() if order_type == OrderType.BUY else self.bid()

    def get_close_offer(self, order_type: OrderType) -> float:
        """Price a position closes at: bid for a buy, ask for a sell."""
        return self.bid() if order_type == OrderType.BUY else self.ask()

    # Tick history

    def save_tick(self, tick: Tick) -> bool:
        """
        Append a quote to the tick history and make it the cached quote.

        Returns:
            False if the history could not grow; prior state is kept
        """
        try:
            self.ticks.append(tick)
        except HistoryAllocationError as e:
            log_platform_error(self.logger, "save_tick", ERR_NOT_ENOUGH_MEMORY, {
                "symbol": self._symbol,
                "requested_capacity": e.requested_capacity,
                "current_capacity": e.current_capacity,
            })
            return False
        self.last_tick = tick
        return True

    def reset_ticks(self) -> bool:
        """Empty the tick history."""
        self.ticks.reset()
        return True

    def get_ticks(self) -> tuple[Tick, ...]:
        """Saved quotes, oldest first."""
        return self.ticks.snapshot()

    # Unit conversions

    def get_point_size(self) -> float:
        return properties.get_point_size(self.provider, self._symbol, self.logger)

    def get_pip_size(self) -> float:
        return properties.get_pip_size(self.provider, self._symbol, self.logger)

    def get_points_per_pip(self) -> int:
        return properties.get_points_per_pip(self.provider, self._symbol, self.logger)

    def get_digits(self) -> int:
        return properties.get_digits(self.provider, self._symbol, self.logger)

    def get_spread(self) -> int:
        """Spread in points as reported by the platform."""
        return properties.get_spread(self.provider, self._symbol, self.logger)

    def get_real_spread(self) -> int:
        """Spread in points computed from a fresh quote."""
        tick = self.get_tick()
        # round(..., 8) drops float noise such as 4.999999999 before rounding
        return round_half_away(round((tick.ask - tick.bid) * 10 ** self.get_digits(), 8))

    def normalize_price(self, price: float) -> float:
        """Round a price to the instrument's digit count."""
        return normalize_double(price, self.get_digits())

    def get_tick_value(self) -> float:
        return properties.get_tick_value(self.provider, self._symbol, self.logger)

    def get_tick_value_profit(self) -> float:
        return properties.get_tick_value_profit(self.provider, self._symbol, self.logger)

    def get_tick_value_loss(self) -> float:
        return properties.get_tick_value_loss(self.provider, self._symbol, self.logger)

    def get_tick_size(self) -> float:
        return properties.get_tick_size(self.provider, self._symbol, self.logger)

    def get_trade_contract_size(self) -> float:
        return properties.get_trade_contract_size(self.provider, self._symbol, self.logger)

    def get_volume_min(self) -> float:
        return properties.get_volume_min(self.provider, self._symbol, self.logger)

    def get_volume_max(self) -> float:
        return properties.get_volume_max(self.provider, self._symbol, self.logger)

    def get_volume_step(self) -> float:
        return properties.get_volume_step(self.provider, self._symbol, self.logger)

    def get_freeze_level(self) -> int:
        return properties.get_freeze_level(self.provider, self._symbol, self.logger)

    def get_trade_stops_level(self) -> int:
        return properties.get_trade_stops_level(self.provider, self._symbol, self.logger)

    def get_margin_init(self) -> float:
        return properties.get_margin_init(self.provider, self._symbol, self.logger)

    def get_margin_maintenance(self) -> float:
        return properties.get_margin_maintenance(self.provider, self._symbol, self.logger)

    # Diagnostics

    def to_string(self) -> str:
        """Human-readable dump of the instrument state. Fetches a fresh quote."""
        real_spread = self.get_real_spread()
        points_per_pip = self.get_points_per_pip()
        return (
            f"Symbol: {self._symbol}, "
            f"Last Ask/Bid: {self.get_last_ask():g}/{self.get_last_bid():g}, "
            f"Last Volume: {self.get_last_volume()}, "
            f"Point size: {self.get_point_size():g}, "
            f"Pip size: {self.get_pip_size():g}, "
            f"Points per pip: {points_per_pip}, "
            f"Real spread: {real_spread} pts ({real_spread / points_per_pip:g} pips), "
            f"Tick value: {self.get_tick_value():g}, "
            f"Digits: {self.get_digits()}, "
            f"Spread: {self.get_spread()} pts, "
            f"Trade stops level: {self.get_trade_stops_level()}, "
            f"Trade contract size: {self.get_trade_contract_size():g}, "
            f"Min lot: {self.get_volume_min():g}, "
            f"Max lot: {self.get_volume_max():g}, "
            f"Lot step: {self.get_volume_step():g}, "
            f"Freeze level: {self.get_freeze_level()}, "
            f"Margin initial (maintenance): {self.get_margin_init():g} "
            f"({self.get_margin_maintenance():g})"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SymbolInfo(symbol={self._symbol!r}, ticks={len(self.ticks)})"
