"""
System failure error classifications.

These exceptions represent conditions that the layer cannot recover from on
its own, such as an unusable configuration or a missing terminal connection.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class HistoryAllocationError(SystemFailureError):
    """Tick history storage could not be grown."""

    def __init__(self, message: str, requested_capacity: Optional[int] = None,
                 current_capacity: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.requested_capacity = requested_capacity
        self.current_capacity = current_capacity


class ConfigurationError(SystemFailureError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class ProviderUnavailableError(SystemFailureError):
    """The market data provider backend is not installed or not connected."""

    def __init__(self, message: str, provider: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.provider = provider
