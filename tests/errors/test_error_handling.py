"""
Error handling tests for the market data access layer.

Tests cover the error classification, platform error descriptions and the
recovery paths that turn failed platform reads into fallback values.
"""

import pytest
from unittest.mock import Mock

from mtdata.data.models import EMPTY_VALUE, DoubleProperty, Timeframe
from mtdata.errors import (
    ConfigurationError,
    HistoryAllocationError,
    IndicatorFetchError,
    MarketDataError,
    ProviderUnavailableError,
    SymbolPropertyError,
    SystemFailureError,
    TickFetchError,
)
from mtdata.errors.codes import (
    ERR_INDICATOR_CANNOT_CREATE,
    ERR_MARKET_UNKNOWN_SYMBOL,
    ERR_NO_ERROR,
    RES_E_NOT_FOUND,
    describe_error,
)
from mtdata.indicators import AwesomeOscillator, DirectRetrieval, IndicatorContext
from mtdata.symbols.symbol_info import SymbolInfo


class TestErrorClassification:
    """Test error classification system."""

    def test_market_data_error_hierarchy(self):
        """Test that market data errors are recoverable."""
        base_error = MarketDataError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}
        assert base_error.error_code == 0

        tick_error = TickFetchError("no quote", symbol="EURUSD", error_code=ERR_MARKET_UNKNOWN_SYMBOL)
        assert isinstance(tick_error, MarketDataError)
        assert tick_error.symbol == "EURUSD"
        assert tick_error.error_code == ERR_MARKET_UNKNOWN_SYMBOL

        indicator_error = IndicatorFetchError(
            "no value", indicator="RVI", shift=3, line=1, operation="copy_buffer",
        )
        assert isinstance(indicator_error, MarketDataError)
        assert (indicator_error.indicator, indicator_error.shift, indicator_error.line) == ("RVI", 3, 1)
        assert indicator_error.operation == "copy_buffer"

        property_error = SymbolPropertyError("no point", symbol="EURUSD", prop="point")
        assert property_error.prop == "point"
        assert property_error.recoverable is True

    def test_system_failure_error_hierarchy(self):
        """Test that system failure errors are not recoverable."""
        allocation_error = HistoryAllocationError(
            "out of memory", requested_capacity=200, current_capacity=100,
        )
        assert isinstance(allocation_error, SystemFailureError)
        assert allocation_error.recoverable is False
        assert allocation_error.requested_capacity == 200
        assert allocation_error.current_capacity == 100

        config_error = ConfigurationError("bad config", errors=["x"], context={"symbol": "EURUSD"})
        assert config_error.errors == ["x"]
        assert config_error.context == {"symbol": "EURUSD"}

        provider_error = ProviderUnavailableError("missing", provider="mt5")
        assert provider_error.provider == "mt5"
        assert provider_error.recoverable is False

    def test_market_data_errors_are_not_system_failures(self):
        assert not isinstance(TickFetchError("x"), SystemFailureError)
        assert not isinstance(HistoryAllocationError("x"), MarketDataError)


class TestErrorDescriptions:
    """Test platform error code descriptions."""

    @pytest.mark.parametrize("code,description", [
        (ERR_NO_ERROR, "No error"),
        (ERR_MARKET_UNKNOWN_SYMBOL, "Unknown symbol"),
        (ERR_INDICATOR_CANNOT_CREATE, "Indicator cannot be created"),
        (RES_E_NOT_FOUND, "No history"),
    ])
    def test_known_codes(self, code, description):
        assert describe_error(code) == description

    def test_unknown_code(self):
        assert describe_error(12345) == "Unknown error (12345)"


class TestRecovery:
    """Test that failed platform reads degrade to fallback values."""

    def test_tick_failure_keeps_last_quote(self, provider, mock_logger):
        symbol = SymbolInfo("EURUSD", provider, logger=mock_logger)
        provider.push_quote("EURUSD", ask=1.2, bid=1.1)
        first = symbol.get_tick()

        provider.set_available("EURUSD", False)
        assert symbol.get_tick() is first
        assert mock_logger.error.call_count == 1

    def test_property_failure_returns_sentinel(self, mock_logger):
        provider = Mock()
        provider.fetch_double.return_value = 0.0
        provider.last_error.return_value = ERR_MARKET_UNKNOWN_SYMBOL
        symbol = SymbolInfo("NOPE", provider, logger=mock_logger)

        assert symbol.get_point_size() == EMPTY_VALUE
        provider.fetch_double.assert_called_once_with("NOPE", DoubleProperty.POINT)
        kwargs = mock_logger.error.call_args.kwargs
        assert kwargs["error_description"] == "Unknown symbol"
        assert kwargs["property"] == "point"

    def test_indicator_failure_returns_sentinel(self, provider, mock_logger):
        context = IndicatorContext(symbol="EURUSD", timeframe=Timeframe.MN1, provider=provider)
        ao = AwesomeOscillator(context, logger=mock_logger, retrieval=DirectRetrieval())

        assert ao.get_value() == EMPTY_VALUE
        mock_logger.error.assert_called_once()
