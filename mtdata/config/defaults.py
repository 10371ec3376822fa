"""Default configuration parameters for the market data access layer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TickHistoryParams:
    """Tick history storage parameters."""
    block_size: int = 100                  # Slots added on each growth


@dataclass(frozen=True)
class RetrievalParams:
    """Indicator retrieval strategy selection."""
    default: str = "buffer"                # "direct" or "buffer"
    families: dict = field(default_factory=dict)  # Per-indicator override, e.g. {"AC": "direct"}


@dataclass(frozen=True)
class IndicatorDefaults:
    """Default indicator parameters."""
    timeframe: str = "H1"
    rvi_period: int = 10


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    tick_history: TickHistoryParams
    retrieval: RetrievalParams
    indicators: IndicatorDefaults
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        tick_history=TickHistoryParams(),
        retrieval=RetrievalParams(),
        indicators=IndicatorDefaults(),
        logging=LoggingParams(),
    )
