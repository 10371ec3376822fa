"""
Market data error classifications.

These exceptions describe platform reads that failed to produce fresh data.
They are always recoverable: the public accessors catch them and fall back
to the last known value or to the EMPTY_VALUE sentinel.
"""

from typing import Optional, Dict, Any


class MarketDataError(Exception):
    """Base class for platform fetch failures that can be handled gracefully."""

    def __init__(self, message: str, error_code: int = 0,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}
        self.recoverable = True


class TickFetchError(MarketDataError):
    """The current quote could not be fetched for a symbol."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class IndicatorFetchError(MarketDataError):
    """An indicator value could not be retrieved from the platform."""

    def __init__(self, message: str, indicator: Optional[str] = None,
                 shift: Optional[int] = None, line: Optional[int] = None,
                 operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
        self.operation = operation
        self.shift = shift
        self.line = line


class SymbolPropertyError(MarketDataError):
    """An instrument metadata field could not be read."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 prop: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.prop = prop
