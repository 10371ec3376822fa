"""
Indicator retrieval strategies.

Terminal generations expose indicators in two ways. The direct convention
evaluates an indicator with one call that returns the value. The buffer
convention first obtains a handle for an indicator configuration and then
copies values out of one of its output buffers. Each strategy turns one
request into a value or raises IndicatorFetchError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..data.models import EMPTY_VALUE, Timeframe
from ..errors import ConfigurationError, IndicatorFetchError
from ..errors.codes import (
    ERR_INDICATOR_CANNOT_CREATE,
    ERR_INDICATOR_DATA_NOT_FOUND,
    ERR_NO_ERROR,
)
from ..providers.base import INVALID_HANDLE, MarketDataProvider


@dataclass(frozen=True)
class IndicatorRequest:
    """One indicator value lookup."""
    symbol: str
    timeframe: Timeframe
    name: str
    args: tuple
    line: int
    shift: int


class RetrievalStrategy(ABC):
    """Base class for indicator retrieval conventions."""

    name: str = ""

    @abstractmethod
    def fetch(self, provider: MarketDataProvider, request: IndicatorRequest) -> float:
        """
        Retrieve one indicator value.

        Raises:
            IndicatorFetchError: if the platform produced no value
        """
        pass

    def _failure(self, request: IndicatorRequest, operation: str, code: int) -> IndicatorFetchError:
        return IndicatorFetchError(
            f"{request.name} value unavailable at shift {request.shift}",
            indicator=request.name,
            shift=request.shift,
            line=request.line,
            operation=operation,
            error_code=code,
        )


class DirectRetrieval(RetrievalStrategy):
    """Single call returning the value; failure is signalled by the last error."""

    name = "direct"

    def fetch(self, provider: MarketDataProvider, request: IndicatorRequest) -> float:
        value = provider.fetch_indicator_direct(
            request.symbol, request.timeframe, request.name,
            request.args, request.line, request.shift,
        )
        code = provider.last_error()
        if code != ERR_NO_ERROR or value == EMPTY_VALUE:
            raise self._failure(request, "fetch_indicator_direct",
                                code or ERR_INDICATOR_DATA_NOT_FOUND)
        return value


class BufferRetrieval(RetrievalStrategy):
    """Handle lookup followed by a one-element buffer copy."""

    name = "buffer"

    def fetch(self, provider: MarketDataProvider, request: IndicatorRequest) -> float:
        handle = provider.obtain_indicator_handle(
            request.symbol, request.timeframe, request.name, request.args,
        )
        if handle == INVALID_HANDLE:
            raise self._failure(request, "obtain_indicator_handle",
                                provider.last_error() or ERR_INDICATOR_CANNOT_CREATE)

        values = provider.copy_buffer(handle, request.line, request.shift, 1)
        if len(values) < 1:
            raise self._failure(request, "copy_buffer",
                                provider.last_error() or ERR_INDICATOR_DATA_NOT_FOUND)
        return values[0]


STRATEGIES: dict[str, type[RetrievalStrategy]] = {
    DirectRetrieval.name: DirectRetrieval,
    BufferRetrieval.name: BufferRetrieval,
}


def select_strategy(config: Optional[dict[str, Any]], family: str) -> RetrievalStrategy:
    """
    Pick the retrieval strategy for an indicator family.

    A per-family entry under retrieval.families wins over retrieval.default.

    Raises:
        ConfigurationError: for an unknown strategy name
    """
    retrieval = (config or {}).get("retrieval", {})
    name = retrieval.get("families", {}).get(family, retrieval.get("default", BufferRetrieval.name))

    if name not in STRATEGIES:
        raise ConfigurationError(
            f"Unknown indicator retrieval strategy: {name}",
            context={"family": family},
        )
    return STRATEGIES[name]()
