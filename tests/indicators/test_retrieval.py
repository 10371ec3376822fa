"""Tests for the indicator retrieval strategies."""

import pytest
from unittest.mock import Mock

from mtdata.data.models import EMPTY_VALUE, Timeframe
from mtdata.errors import ConfigurationError, IndicatorFetchError
from mtdata.errors.codes import (
    ERR_INDICATOR_CANNOT_CREATE,
    ERR_INDICATOR_DATA_NOT_FOUND,
    ERR_INDICATOR_WRONG_HANDLE,
)
from mtdata.indicators.retrieval import (
    BufferRetrieval,
    DirectRetrieval,
    IndicatorRequest,
    select_strategy,
)
from mtdata.providers.base import INVALID_HANDLE


def make_request(shift: int = 0, line: int = 0) -> IndicatorRequest:
    return IndicatorRequest(symbol="EURUSD", timeframe=Timeframe.H1, name="RVI",
                            args=(10,), line=line, shift=shift)


def make_provider() -> Mock:
    provider = Mock()
    provider.last_error.return_value = 0
    return provider


class TestDirectRetrieval:
    """Test the single-call convention."""

    def test_returns_value(self):
        provider = make_provider()
        provider.fetch_indicator_direct.return_value = 0.25

        assert DirectRetrieval().fetch(provider, make_request(shift=3, line=1)) == 0.25
        provider.fetch_indicator_direct.assert_called_once_with(
            "EURUSD", Timeframe.H1, "RVI", (10,), 1, 3)

    def test_error_code_signals_failure(self):
        provider = make_provider()
        provider.fetch_indicator_direct.return_value = 0.0
        provider.last_error.return_value = ERR_INDICATOR_DATA_NOT_FOUND

        with pytest.raises(IndicatorFetchError) as exc_info:
            DirectRetrieval().fetch(provider, make_request())
        assert exc_info.value.error_code == ERR_INDICATOR_DATA_NOT_FOUND
        assert exc_info.value.operation == "fetch_indicator_direct"

    def test_empty_value_signals_failure(self):
        provider = make_provider()
        provider.fetch_indicator_direct.return_value = EMPTY_VALUE

        with pytest.raises(IndicatorFetchError) as exc_info:
            DirectRetrieval().fetch(provider, make_request())
        assert exc_info.value.error_code == ERR_INDICATOR_DATA_NOT_FOUND


class TestBufferRetrieval:
    """Test the handle plus buffer copy convention."""

    def test_copies_one_element_at_shift(self):
        provider = make_provider()
        provider.obtain_indicator_handle.return_value = 11
        provider.copy_buffer.return_value = [0.75]

        assert BufferRetrieval().fetch(provider, make_request(shift=2, line=1)) == 0.75
        provider.obtain_indicator_handle.assert_called_once_with(
            "EURUSD", Timeframe.H1, "RVI", (10,))
        provider.copy_buffer.assert_called_once_with(11, 1, 2, 1)

    def test_invalid_handle(self):
        provider = make_provider()
        provider.obtain_indicator_handle.return_value = INVALID_HANDLE

        with pytest.raises(IndicatorFetchError) as exc_info:
            BufferRetrieval().fetch(provider, make_request())
        assert exc_info.value.operation == "obtain_indicator_handle"
        assert exc_info.value.error_code == ERR_INDICATOR_CANNOT_CREATE
        provider.copy_buffer.assert_not_called()

    def test_short_copy(self):
        provider = make_provider()
        provider.obtain_indicator_handle.return_value = 11
        provider.copy_buffer.return_value = []
        provider.last_error.return_value = ERR_INDICATOR_WRONG_HANDLE

        with pytest.raises(IndicatorFetchError) as exc_info:
            BufferRetrieval().fetch(provider, make_request())
        assert exc_info.value.operation == "copy_buffer"
        assert exc_info.value.error_code == ERR_INDICATOR_WRONG_HANDLE


class TestStrategySelection:
    """Test configuration-driven strategy binding."""

    def test_default_is_buffer(self):
        assert isinstance(select_strategy(None, "AC"), BufferRetrieval)

    def test_configured_default(self):
        config = {"retrieval": {"default": "direct"}}
        assert isinstance(select_strategy(config, "AC"), DirectRetrieval)

    def test_family_override(self):
        config = {"retrieval": {"default": "buffer", "families": {"AC": "direct"}}}
        assert isinstance(select_strategy(config, "AC"), DirectRetrieval)
        assert isinstance(select_strategy(config, "RVI"), BufferRetrieval)

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError):
            select_strategy({"retrieval": {"default": "magic"}}, "AC")
