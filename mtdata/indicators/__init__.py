"""Technical indicator access over both terminal retrieval conventions"""

from .ac import ACParams, AcceleratorOscillator
from .ao import AOParams, AwesomeOscillator
from .base import Indicator, IndicatorContext, IndicatorParams
from .retrieval import BufferRetrieval, DirectRetrieval, RetrievalStrategy, select_strategy
from .rvi import RelativeVigorIndex, RVILine, RVIParams

__all__ = [
    "ACParams",
    "AOParams",
    "AcceleratorOscillator",
    "AwesomeOscillator",
    "BufferRetrieval",
    "DirectRetrieval",
    "Indicator",
    "IndicatorContext",
    "IndicatorParams",
    "RVILine",
    "RVIParams",
    "RelativeVigorIndex",
    "RetrievalStrategy",
    "select_strategy",
]
