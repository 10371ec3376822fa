"""Awesome Oscillator"""

from dataclasses import dataclass
from typing import Any, Optional

from .base import Indicator, IndicatorContext, IndicatorParams


@dataclass(frozen=True)
class AOParams(IndicatorParams):
    """The oscillator has no tunable parameters."""


class AwesomeOscillator(Indicator):
    """Single-line oscillator: fast minus slow SMA of the median price."""

    name = "AO"

    def __init__(self, context: IndicatorContext, params: Optional[AOParams] = None, **kwargs: Any):
        super().__init__(params or AOParams(), context, **kwargs)

    def get_value(self, shift: int = 0) -> float:  # type: ignore[override]
        return self.fetch_value(shift)
