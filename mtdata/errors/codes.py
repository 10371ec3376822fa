"""
Platform error codes and their descriptions.

Positive codes follow the terminal's runtime error numbering. Negative codes
are the result codes of the terminal's Python IPC bridge.
"""

ERR_NO_ERROR = 0
ERR_NOT_ENOUGH_MEMORY = 4004
ERR_HISTORY_NOT_FOUND = 4401
ERR_MARKET_UNKNOWN_SYMBOL = 4301
ERR_MARKET_NOT_SELECTED = 4302
ERR_MARKET_WRONG_PROPERTY = 4303
ERR_INDICATOR_UNKNOWN_SYMBOL = 4801
ERR_INDICATOR_CANNOT_CREATE = 4802
ERR_INDICATOR_DATA_NOT_FOUND = 4806
ERR_INDICATOR_WRONG_HANDLE = 4807
ERR_INDICATOR_WRONG_PARAMETERS = 4808

RES_E_FAIL = -1
RES_E_INVALID_PARAMS = -2
RES_E_NO_MEMORY = -3
RES_E_NOT_FOUND = -4
RES_E_INVALID_VERSION = -5
RES_E_AUTH_FAILED = -6
RES_E_UNSUPPORTED = -7
RES_E_INTERNAL_FAIL = -10000
RES_E_INTERNAL_FAIL_TIMEOUT = -10005

ERROR_DESCRIPTIONS = {
    ERR_NO_ERROR: "No error",
    ERR_NOT_ENOUGH_MEMORY: "Not enough memory",
    ERR_HISTORY_NOT_FOUND: "Requested history not found",
    ERR_MARKET_UNKNOWN_SYMBOL: "Unknown symbol",
    ERR_MARKET_NOT_SELECTED: "Symbol is not selected in MarketWatch",
    ERR_MARKET_WRONG_PROPERTY: "Wrong identifier of a symbol property",
    ERR_INDICATOR_UNKNOWN_SYMBOL: "Unknown symbol for indicator",
    ERR_INDICATOR_CANNOT_CREATE: "Indicator cannot be created",
    ERR_INDICATOR_DATA_NOT_FOUND: "Requested indicator data not found",
    ERR_INDICATOR_WRONG_HANDLE: "Wrong indicator handle",
    ERR_INDICATOR_WRONG_PARAMETERS: "Wrong parameters when creating an indicator",
    RES_E_FAIL: "Generic fail",
    RES_E_INVALID_PARAMS: "Invalid arguments/parameters",
    RES_E_NO_MEMORY: "No memory condition",
    RES_E_NOT_FOUND: "No history",
    RES_E_INVALID_VERSION: "Invalid version",
    RES_E_AUTH_FAILED: "Authorization failed",
    RES_E_UNSUPPORTED: "Unsupported method",
    RES_E_INTERNAL_FAIL: "Internal IPC general error",
    RES_E_INTERNAL_FAIL_TIMEOUT: "Internal timeout",
}


def describe_error(code: int) -> str:
    """Return a human-readable description for a platform error code."""
    return ERROR_DESCRIPTIONS.get(code, f"Unknown error ({code})")
