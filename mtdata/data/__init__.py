"""
Quote, bar and instrument data models and tick storage.
"""

from .models import (
    EMPTY_VALUE,
    Bar,
    DoubleProperty,
    IntegerProperty,
    OrderType,
    SymbolSpec,
    Tick,
    Timeframe,
)
from .tick_history import TickHistory

__all__ = [
    "EMPTY_VALUE",
    "Bar",
    "DoubleProperty",
    "IntegerProperty",
    "OrderType",
    "SymbolSpec",
    "Tick",
    "TickHistory",
    "Timeframe",
]
