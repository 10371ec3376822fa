"""Indicator evaluation from bar history, shared by the concrete providers."""

from abc import abstractmethod
from typing import Optional

from ..data.models import EMPTY_VALUE, Bar, Timeframe
from ..errors.codes import (
    ERR_HISTORY_NOT_FOUND,
    ERR_INDICATOR_CANNOT_CREATE,
    ERR_INDICATOR_DATA_NOT_FOUND,
    ERR_INDICATOR_WRONG_HANDLE,
    ERR_INDICATOR_WRONG_PARAMETERS,
    ERR_NO_ERROR,
)
from ..indicators.formulas import INDICATOR_FORMULAS, required_bars
from .base import INVALID_HANDLE

HandleKey = tuple[str, Timeframe, str, tuple]


class ComputedIndicatorsMixin:
    """
    Implements both indicator conventions on top of a bar source.

    Handles are allocated once per (symbol, timeframe, name, args) key and
    reused for the lifetime of the provider.
    """

    def _init_indicators(self) -> None:
        self._handles: dict[HandleKey, int] = {}
        self._handle_keys: dict[int, HandleKey] = {}

    @abstractmethod
    def _fetch_bars(self, symbol: str, timeframe: Timeframe, count: int) -> Optional[list[Bar]]:
        """Most recent bars in chronological order, None if unavailable."""
        pass

    def _evaluate(self, key: HandleKey, line: int, shift: int, count: int) -> list[float]:
        symbol, timeframe, name, args = key
        if shift < 0 or count <= 0:
            self.set_last_error(ERR_INDICATOR_DATA_NOT_FOUND)
            return []

        needed = required_bars(name, args, shift + count - 1)
        bars = self._fetch_bars(symbol, timeframe, needed)
        if not bars:
            if self.last_error() == ERR_NO_ERROR:
                self.set_last_error(ERR_HISTORY_NOT_FOUND)
            return []

        try:
            lines = INDICATOR_FORMULAS[name](bars, args)
        except ValueError:
            self.set_last_error(ERR_INDICATOR_WRONG_PARAMETERS)
            return []

        if not 0 <= line < len(lines):
            self.set_last_error(ERR_INDICATOR_DATA_NOT_FOUND)
            return []

        series = lines[line]
        values = []
        for offset in range(shift, shift + count):
            position = len(series) - 1 - offset
            if position < 0 or series[position] is None:
                break
            values.append(series[position])

        if len(values) < count:
            self.set_last_error(ERR_INDICATOR_DATA_NOT_FOUND)
        return values

    def fetch_indicator_direct(self, symbol: str, timeframe: Timeframe, name: str,
                               args: tuple, line: int, shift: int) -> float:
        if name not in INDICATOR_FORMULAS:
            self.set_last_error(ERR_INDICATOR_CANNOT_CREATE)
            return EMPTY_VALUE

        values = self._evaluate((symbol, timeframe, name, tuple(args)), line, shift, 1)
        return values[0] if values else EMPTY_VALUE

    def obtain_indicator_handle(self, symbol: str, timeframe: Timeframe,
                                name: str, args: tuple) -> int:
        if name not in INDICATOR_FORMULAS:
            self.set_last_error(ERR_INDICATOR_CANNOT_CREATE)
            return INVALID_HANDLE

        key = (symbol, timeframe, name, tuple(args))
        if key not in self._handles:
            handle = len(self._handles) + 10
            self._handles[key] = handle
            self._handle_keys[handle] = key
        return self._handles[key]

    def copy_buffer(self, handle: int, line: int, shift: int, count: int) -> list[float]:
        key = self._handle_keys.get(handle)
        if key is None:
            self.set_last_error(ERR_INDICATOR_WRONG_HANDLE)
            return []
        return self._evaluate(key, line, shift, count)

    def indicator_handle_count(self) -> int:
        """Number of distinct indicator configurations created so far."""
        return len(self._handles)
