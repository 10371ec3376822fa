"""
Centralized logging configuration for the mtdata access layer.

This module provides standardized logging configuration using structlog.
Every platform failure in the layer is reported through log_platform_error
so quote and indicator failures share one structured format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..errors.codes import ERR_NO_ERROR, describe_error


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_symbol_logger(name: str, symbol: str) -> FilteringBoundLogger:
    """Get a logger bound to an instrument."""
    return get_logger(name).bind(
        subsystem="symbol",
        symbol=symbol,
    )


def get_indicator_logger(name: str, indicator: str, symbol: str,
                         timeframe: str) -> FilteringBoundLogger:
    """Get a logger bound to an indicator instance and its chart context."""
    return get_logger(name).bind(
        subsystem="indicator",
        indicator=indicator,
        symbol=symbol,
        timeframe=timeframe,
    )


def log_platform_error(
    logger: FilteringBoundLogger,
    operation: str,
    code: int,
    context: Optional[dict[str, Any]] = None
) -> bool:
    """
    Report the last platform error of an operation, if any.

    Args:
        logger: Structlog logger instance
        operation: Name of the platform call that was made
        code: Platform error code read after the call
        context: Additional context data

    Returns:
        True if an error was reported, False for ERR_NO_ERROR
    """
    if code == ERR_NO_ERROR:
        return False

    fields: dict[str, Any] = {
        "operation": operation,
        "error_code": code,
        "error_description": describe_error(code),
    }
    if context:
        fields.update(context)

    logger.error("Platform call failed", **fields)
    return True
