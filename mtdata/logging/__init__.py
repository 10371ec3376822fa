"""
Logging configuration and utilities for the mtdata access layer.
"""
from .config import configure_logging, get_logger, log_platform_error

__all__ = ["configure_logging", "get_logger", "log_platform_error"]
