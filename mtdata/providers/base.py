"""Market data provider contract.

A provider wraps one trading-terminal API. Every call is blocking and either
returns data or records a platform error code readable via last_error().
Indicator access comes in two conventions: a direct call returning the value,
and a handle obtained once per configuration whose buffers are copied.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..data.models import DoubleProperty, IntegerProperty, Tick, Timeframe
from ..errors.codes import ERR_NO_ERROR

INVALID_HANDLE = -1


class MarketDataProvider(ABC):
    """Base class for terminal market data APIs."""

    def __init__(self, name: str):
        self.name = name
        self._last_error = ERR_NO_ERROR

    def last_error(self) -> int:
        """Error code of the most recent failed call, ERR_NO_ERROR if none."""
        return self._last_error

    def reset_last_error(self) -> None:
        """Clear the recorded error code."""
        self._last_error = ERR_NO_ERROR

    def set_last_error(self, code: int) -> None:
        """Record an error code for the caller to read."""
        self._last_error = code

    @abstractmethod
    def fetch_tick(self, symbol: str) -> Optional[Tick]:
        """
        Fetch the current quote for a symbol.

        Returns:
            The quote, or None if no quote could be fetched
        """
        pass

    @abstractmethod
    def fetch_double(self, symbol: str, prop: DoubleProperty) -> float:
        """Read a floating point instrument property; 0.0 on failure."""
        pass

    @abstractmethod
    def fetch_integer(self, symbol: str, prop: IntegerProperty) -> int:
        """Read an integer instrument property; 0 on failure."""
        pass

    @abstractmethod
    def fetch_indicator_direct(self, symbol: str, timeframe: Timeframe, name: str,
                               args: tuple, line: int, shift: int) -> float:
        """Evaluate an indicator line at a shift in a single call."""
        pass

    @abstractmethod
    def obtain_indicator_handle(self, symbol: str, timeframe: Timeframe,
                                name: str, args: tuple) -> int:
        """
        Get the handle of an indicator configuration.

        The same configuration always yields the same handle.

        Returns:
            Handle, or INVALID_HANDLE on failure
        """
        pass

    @abstractmethod
    def copy_buffer(self, handle: int, line: int, shift: int, count: int) -> list[float]:
        """
        Copy values of one indicator line.

        Returns:
            Up to count values starting at shift, most recent first. Fewer
            values than requested means the copy failed.
        """
        pass
