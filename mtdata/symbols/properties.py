"""
Instrument metadata accessors and unit conversions.

Every function takes the provider and the symbol explicitly, so the same
code serves one-off lookups and SymbolInfo instances alike. A failed read is
logged and yields a fallback value instead of raising: EMPTY_VALUE for
floating point properties and 0 for integer properties, unless a property
documents its own fallback.
"""

from typing import Optional

from structlog.types import FilteringBoundLogger

from ..data.models import EMPTY_VALUE, DoubleProperty, IntegerProperty
from ..errors import SymbolPropertyError
from ..errors.codes import ERR_NO_ERROR
from ..logging.config import get_logger, log_platform_error
from ..providers.base import MarketDataProvider

module_logger = get_logger(__name__)


def fetch_double_checked(provider: MarketDataProvider, symbol: str,
                         prop: DoubleProperty) -> float:
    """
    Read a floating point property, raising on a platform error.

    Raises:
        SymbolPropertyError: if the provider reported an error for the read
    """
    provider.reset_last_error()
    value = provider.fetch_double(symbol, prop)
    code = provider.last_error()
    if code != ERR_NO_ERROR:
        raise SymbolPropertyError(
            f"Cannot read {prop.value} of {symbol}",
            symbol=symbol, prop=prop.value, error_code=code,
        )
    return value


def fetch_integer_checked(provider: MarketDataProvider, symbol: str,
                          prop: IntegerProperty) -> int:
    """
    Read an integer property, raising on a platform error.

    Raises:
        SymbolPropertyError: if the provider reported an error for the read
    """
    provider.reset_last_error()
    value = provider.fetch_integer(symbol, prop)
    code = provider.last_error()
    if code != ERR_NO_ERROR:
        raise SymbolPropertyError(
            f"Cannot read {prop.value} of {symbol}",
            symbol=symbol, prop=prop.value, error_code=code,
        )
    return value


def read_double(provider: MarketDataProvider, symbol: str, prop: DoubleProperty,
                logger: Optional[FilteringBoundLogger] = None,
                default: float = EMPTY_VALUE) -> float:
    """Read a floating point property, logging and returning default on failure."""
    try:
        return fetch_double_checked(provider, symbol, prop)
    except SymbolPropertyError as e:
        log_platform_error(logger or module_logger, "fetch_double", e.error_code,
                           {"symbol": symbol, "property": e.prop})
        return default


def read_integer(provider: MarketDataProvider, symbol: str, prop: IntegerProperty,
                 logger: Optional[FilteringBoundLogger] = None,
                 default: int = 0) -> int:
    """Read an integer property, logging and returning default on failure."""
    try:
        return fetch_integer_checked(provider, symbol, prop)
    except SymbolPropertyError as e:
        log_platform_error(logger or module_logger, "fetch_integer", e.error_code,
                           {"symbol": symbol, "property": e.prop})
        return default


# Unit conversions

def get_point_size(provider: MarketDataProvider, symbol: str,
                   logger: Optional[FilteringBoundLogger] = None) -> float:
    """Smallest quotable price increment."""
    return read_double(provider, symbol, DoubleProperty.POINT, logger)


def get_digits(provider: MarketDataProvider, symbol: str,
               logger: Optional[FilteringBoundLogger] = None) -> int:
    """Number of decimal digits in quoted prices."""
    return read_integer(provider, symbol, IntegerProperty.DIGITS, logger)


def get_points_per_pip(provider: MarketDataProvider, symbol: str,
                       logger: Optional[FilteringBoundLogger] = None) -> int:
    """
    Points in one pip: 1 for an odd digit count, 10 for an even one.

    The parity rule is a heuristic for currency pairs and does not hold for
    every metal quote.
    """
    return 1 if get_digits(provider, symbol, logger) % 2 == 1 else 10


def get_pip_size(provider: MarketDataProvider, symbol: str,
                 logger: Optional[FilteringBoundLogger] = None) -> float:
    """Pip size: the point size, times 10 when the digit count is even."""
    point = get_point_size(provider, symbol, logger)
    if point == EMPTY_VALUE:
        return EMPTY_VALUE
    return point * get_points_per_pip(provider, symbol, logger)


def get_spread(provider: MarketDataProvider, symbol: str,
               logger: Optional[FilteringBoundLogger] = None) -> int:
    """Spread in points as reported by the platform."""
    return read_integer(provider, symbol, IntegerProperty.SPREAD, logger)


# Tick value and size

def get_tick_value(provider: MarketDataProvider, symbol: str,
                   logger: Optional[FilteringBoundLogger] = None) -> float:
    """
    Value of one tick move for one lot, in account currency.

    Falls back to the profit-side value when the primary field is not
    positive, and to 1 when neither is.
    """
    value = read_double(provider, symbol, DoubleProperty.TRADE_TICK_VALUE, logger, default=0.0)
    if value > 0:
        return value
    value = read_double(provider, symbol, DoubleProperty.TRADE_TICK_VALUE_PROFIT, logger, default=0.0)
    if value > 0:
        return value
    return 1.0


def get_tick_value_profit(provider: MarketDataProvider, symbol: str,
                          logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.TRADE_TICK_VALUE_PROFIT, logger)


def get_tick_value_loss(provider: MarketDataProvider, symbol: str,
                        logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.TRADE_TICK_VALUE_LOSS, logger)


def get_tick_size(provider: MarketDataProvider, symbol: str,
                  logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.TRADE_TICK_SIZE, logger)


# Trade and volume limits

def get_trade_contract_size(provider: MarketDataProvider, symbol: str,
                            logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.TRADE_CONTRACT_SIZE, logger)


def get_volume_min(provider: MarketDataProvider, symbol: str,
                   logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.VOLUME_MIN, logger)


def get_volume_max(provider: MarketDataProvider, symbol: str,
                   logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.VOLUME_MAX, logger)


def get_volume_step(provider: MarketDataProvider, symbol: str,
                    logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.VOLUME_STEP, logger)


def get_freeze_level(provider: MarketDataProvider, symbol: str,
                     logger: Optional[FilteringBoundLogger] = None) -> int:
    """Distance in points within which orders cannot be modified."""
    return read_integer(provider, symbol, IntegerProperty.TRADE_FREEZE_LEVEL, logger)


def get_trade_stops_level(provider: MarketDataProvider, symbol: str,
                          logger: Optional[FilteringBoundLogger] = None) -> int:
    """Minimum distance in points for stop orders from the current price."""
    return read_integer(provider, symbol, IntegerProperty.TRADE_STOPS_LEVEL, logger)


def get_margin_init(provider: MarketDataProvider, symbol: str,
                    logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.MARGIN_INITIAL, logger)


def get_margin_maintenance(provider: MarketDataProvider, symbol: str,
                           logger: Optional[FilteringBoundLogger] = None) -> float:
    return read_double(provider, symbol, DoubleProperty.MARGIN_MAINTENANCE, logger)
