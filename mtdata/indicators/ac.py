"""Accelerator/Decelerator Oscillator"""

from dataclasses import dataclass
from typing import Any, Optional

from .base import Indicator, IndicatorContext, IndicatorParams


@dataclass(frozen=True)
class ACParams(IndicatorParams):
    """The oscillator has no tunable parameters."""


class AcceleratorOscillator(Indicator):
    """Single-line oscillator measuring acceleration of the Awesome Oscillator."""

    name = "AC"

    def __init__(self, context: IndicatorContext, params: Optional[ACParams] = None, **kwargs: Any):
        super().__init__(params or ACParams(), context, **kwargs)

    def get_value(self, shift: int = 0) -> float:  # type: ignore[override]
        return self.fetch_value(shift)
