"""
Error classification for market data and indicator access.

Recoverable errors describe a platform read that did not produce fresh data.
System failures describe conditions the layer cannot work around by itself.
"""

from .market_data import (
    MarketDataError,
    TickFetchError,
    IndicatorFetchError,
    SymbolPropertyError,
)
from .system_failures import (
    SystemFailureError,
    HistoryAllocationError,
    ConfigurationError,
    ProviderUnavailableError,
)

__all__ = [
    # Market data errors
    "MarketDataError",
    "TickFetchError",
    "IndicatorFetchError",
    "SymbolPropertyError",
    # System failures
    "SystemFailureError",
    "HistoryAllocationError",
    "ConfigurationError",
    "ProviderUnavailableError",
]
