"""Relative Vigor Index"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Optional

from .base import Indicator, IndicatorContext, IndicatorParams

DEFAULT_RVI_PERIOD = 10


class RVILine(IntEnum):
    """Output lines."""
    MAIN = 0
    SIGNAL = 1


@dataclass(frozen=True)
class RVIParams(IndicatorParams):
    """RVI parameters."""
    period: int = DEFAULT_RVI_PERIOD    # Averaging period

    def __post_init__(self):
        if self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period}")

    def to_args(self) -> tuple:
        return (self.period,)


class RelativeVigorIndex(Indicator):
    """
    Two-line oscillator comparing the close-open move to the bar range.

    When no params are given, the period comes from the indicators.rvi_period
    configuration entry.
    """

    name = "RVI"
    line_count = 2

    def __init__(self, context: IndicatorContext, params: Optional[RVIParams] = None, **kwargs: Any):
        if params is None:
            config = kwargs.get("config") or {}
            period = config.get("indicators", {}).get("rvi_period", DEFAULT_RVI_PERIOD)
            params = RVIParams(period=period)
        super().__init__(params, context, **kwargs)

    @property
    def period(self) -> int:
        return self.params.period

    @period.setter
    def period(self, value: int) -> None:
        """Takes effect on the next get_value() call."""
        self.params = replace(self.params, period=value)

    def get_value(self, line: RVILine = RVILine.MAIN, shift: int = 0) -> float:  # type: ignore[override]
        return self.fetch_value(shift, line)
