"""
Indicator base: one "value at shift N" contract over both retrieval strategies.

An indicator instance owns its parameters and is bound to one retrieval
strategy for its whole lifetime. Values are never cached: each call goes to
the platform, and a failed fetch yields EMPTY_VALUE plus a log entry.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from structlog.types import FilteringBoundLogger

from ..data.models import EMPTY_VALUE, Timeframe
from ..errors import IndicatorFetchError
from ..logging.config import get_indicator_logger, log_platform_error
from ..providers.base import MarketDataProvider
from .retrieval import IndicatorRequest, RetrievalStrategy, select_strategy


@dataclass(frozen=True)
class IndicatorParams:
    """Base class for indicator parameter bundles."""

    def to_args(self) -> tuple:
        """Platform arguments identifying the indicator configuration."""
        return ()


@dataclass(frozen=True)
class IndicatorContext:
    """Chart an indicator is evaluated on."""
    symbol: str
    timeframe: Timeframe
    provider: MarketDataProvider

    @classmethod
    def from_config(cls, symbol: str, provider: MarketDataProvider,
                    config: Optional[dict[str, Any]] = None) -> "IndicatorContext":
        """Build a context using the configured default timeframe."""
        indicators = (config or {}).get("indicators", {})
        timeframe = Timeframe.from_name(indicators.get("timeframe", "H1"))
        return cls(symbol=symbol, timeframe=timeframe, provider=provider)


class Indicator:
    """
    Base class for indicators.

    Args:
        params: Indicator parameters
        context: Symbol, timeframe and provider to evaluate on
        logger: Logger for platform failures
        config: Merged configuration dict, used to pick the retrieval strategy
        retrieval: Explicit retrieval strategy, overriding the configuration
    """

    name: ClassVar[str] = ""
    line_count: ClassVar[int] = 1

    def __init__(self, params: IndicatorParams, context: IndicatorContext,
                 logger: Optional[FilteringBoundLogger] = None,
                 config: Optional[dict[str, Any]] = None,
                 retrieval: Optional[RetrievalStrategy] = None):
        self.params = params
        self.context = context
        self.config = config or {}
        self.logger = logger or get_indicator_logger(
            __name__, self.name, context.symbol, context.timeframe.name)
        self.retrieval = retrieval or select_strategy(self.config, self.name)

    def get_value(self, shift: int = 0, line: int = 0) -> float:
        """Value of an output line at a shift, EMPTY_VALUE if unavailable."""
        return self.fetch_value(shift, line)

    def fetch_value(self, shift: int, line: int = 0) -> float:
        """
        Retrieve the value of an output line at a shift.

        Args:
            shift: Bars back from the current one, 0 = current
            line: Output line index

        Returns:
            Raw indicator value, or EMPTY_VALUE when the platform has none
        """
        if shift < 0:
            raise ValueError(f"shift must be non-negative, got {shift}")
        if not 0 <= line < self.line_count:
            raise ValueError(f"{self.name} has no output line {line}")

        provider = self.context.provider
        request = IndicatorRequest(
            symbol=self.context.symbol,
            timeframe=self.context.timeframe,
            name=self.name,
            args=self.params.to_args(),
            line=int(line),
            shift=shift,
        )

        provider.reset_last_error()
        try:
            value = self.retrieval.fetch(provider, request)
        except IndicatorFetchError as e:
            log_platform_error(self.logger, e.operation or self.retrieval.name, e.error_code, {
                "shift": shift,
                "line": int(line),
                "strategy": self.retrieval.name,
            })
            return EMPTY_VALUE

        log_platform_error(self.logger, self.retrieval.name, provider.last_error(), {
            "shift": shift,
            "line": int(line),
        })
        return value

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(symbol={self.context.symbol!r}, "
                f"timeframe={self.context.timeframe.name}, params={self.params!r})")
