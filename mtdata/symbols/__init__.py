"""
Instrument access: quotes, tick caching and unit conversions.
"""

from .symbol_info import SymbolInfo

__all__ = ["SymbolInfo"]
