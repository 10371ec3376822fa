"""
Market data providers.

Each provider adapts one terminal API to the MarketDataProvider contract.
"""

from .base import INVALID_HANDLE, MarketDataProvider
from .memory import InMemoryProvider
from .mt5 import MT5Provider

__all__ = [
    "INVALID_HANDLE",
    "InMemoryProvider",
    "MT5Provider",
    "MarketDataProvider",
]
