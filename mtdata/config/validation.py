"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

RETRIEVAL_STRATEGIES = ("direct", "buffer")
TIMEFRAME_NAMES = ("M1", "M5", "M15", "M30", "H1", "H4", "D1", "W1", "MN1")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_tick_history_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tick history parameters."""
        errors = []

        if "block_size" in params:
            value = params["block_size"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="block_size",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_retrieval_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator retrieval strategy selection."""
        errors = []

        if "default" in params:
            value = params["default"]
            if value not in RETRIEVAL_STRATEGIES:
                errors.append(ValidationError(
                    field="default",
                    message=f"Must be one of {', '.join(RETRIEVAL_STRATEGIES)}",
                    value=value
                ))

        if "families" in params:
            families = params["families"]
            if not isinstance(families, dict):
                errors.append(ValidationError(
                    field="families",
                    message="Must be a mapping of indicator name to strategy",
                    value=families
                ))
            else:
                for name, value in families.items():
                    if value not in RETRIEVAL_STRATEGIES:
                        errors.append(ValidationError(
                            field=f"families.{name}",
                            message=f"Must be one of {', '.join(RETRIEVAL_STRATEGIES)}",
                            value=value
                        ))

        return errors

    @staticmethod
    def validate_indicator_defaults(params: dict[str, Any]) -> list[ValidationError]:
        """Validate default indicator parameters."""
        errors = []

        if "timeframe" in params:
            value = params["timeframe"]
            if value not in TIMEFRAME_NAMES:
                errors.append(ValidationError(
                    field="timeframe",
                    message=f"Must be one of {', '.join(TIMEFRAME_NAMES)}",
                    value=value
                ))

        if "rvi_period" in params:
            value = params["rvi_period"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="rvi_period",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        sections = {
            "tick_history": cls.validate_tick_history_params,
            "retrieval": cls.validate_retrieval_params,
            "indicators": cls.validate_indicator_defaults,
            "logging": cls.validate_logging_params,
        }

        for section, validator in sections.items():
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for error in validator(params):
                errors.append(ValidationError(
                    field=f"{section}.{error.field}",
                    message=error.message,
                    value=error.value
                ))

        return errors
