"""MetaTrader 5 terminal provider.

Wraps the MetaTrader5 Python package. Quotes and instrument metadata come
straight from the terminal; indicator values are computed from the bars the
terminal returns, since the Python bridge exposes no indicator calls.
"""

import logging
from typing import Any, Optional

from ..data.models import Bar, DoubleProperty, IntegerProperty, Tick, Timeframe
from ..errors import ProviderUnavailableError
from ..errors.codes import ERR_NO_ERROR, RES_E_FAIL
from ..utils.time import from_epoch_millis, from_epoch_seconds
from .base import MarketDataProvider
from .computed import ComputedIndicatorsMixin

logger = logging.getLogger(__name__)

RES_S_OK = 1


def load_terminal_api() -> Any:
    """Import the MetaTrader5 package."""
    try:
        import MetaTrader5
    except ImportError as e:
        raise ProviderUnavailableError(
            "MetaTrader5 package is not installed; install mtdata[mt5] on Windows",
            provider="mt5",
        ) from e
    return MetaTrader5


class MT5Provider(ComputedIndicatorsMixin, MarketDataProvider):
    """
    Provider backed by a running MetaTrader 5 terminal.

    Args:
        api: The MetaTrader5 module, or any object exposing the same calls.
            Imported on first use when omitted.
    """

    def __init__(self, api: Any = None, name: str = "mt5"):
        super().__init__(name)
        self._init_indicators()
        self.api = api if api is not None else load_terminal_api()
        self.connected = False

    def connect(self, **kwargs: Any) -> None:
        """
        Attach to the terminal.

        Keyword arguments are passed to the terminal's initialize() call
        (path, login, password, server, timeout).
        """
        if not self.api.initialize(**kwargs):
            code, description = self.api.last_error()
            raise ProviderUnavailableError(
                f"MetaTrader5 initialize() failed: {description}",
                provider=self.name,
                context={"error_code": code},
            )
        self.connected = True
        logger.info("Connected to MetaTrader 5 terminal")

    def shutdown(self) -> None:
        """Detach from the terminal."""
        if self.connected:
            self.api.shutdown()
            self.connected = False

    def _record_failure(self) -> None:
        code, _description = self.api.last_error()
        if code in (RES_S_OK, ERR_NO_ERROR):
            code = RES_E_FAIL
        self.set_last_error(code)

    def fetch_tick(self, symbol: str) -> Optional[Tick]:
        raw = self.api.symbol_info_tick(symbol)
        if raw is None:
            self._record_failure()
            return None

        time_msc = getattr(raw, "time_msc", 0)
        time = from_epoch_millis(time_msc) if time_msc else from_epoch_seconds(raw.time)
        return Tick(ask=float(raw.ask), bid=float(raw.bid),
                    volume=int(raw.volume), time=time)

    def _symbol_field(self, symbol: str, field: str) -> Optional[Any]:
        info = self.api.symbol_info(symbol)
        if info is None:
            self._record_failure()
            return None
        return getattr(info, field)

    def fetch_double(self, symbol: str, prop: DoubleProperty) -> float:
        value = self._symbol_field(symbol, prop.value)
        return float(value) if value is not None else 0.0

    def fetch_integer(self, symbol: str, prop: IntegerProperty) -> int:
        value = self._symbol_field(symbol, prop.value)
        return int(value) if value is not None else 0

    def _fetch_bars(self, symbol: str, timeframe: Timeframe, count: int) -> Optional[list[Bar]]:
        terminal_timeframe = getattr(self.api, f"TIMEFRAME_{timeframe.name}")
        rates = self.api.copy_rates_from_pos(symbol, terminal_timeframe, 0, count)
        if rates is None or len(rates) == 0:
            self._record_failure()
            return None

        return [
            Bar(
                ts=from_epoch_seconds(int(rate["time"])),
                open=float(rate["open"]),
                high=float(rate["high"]),
                low=float(rate["low"]),
                close=float(rate["close"]),
                volume=float(rate["tick_volume"]),
            )
            for rate in rates
        ]
