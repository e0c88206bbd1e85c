"""Configuration management."""

from candlefeed.core.config.settings import (
    CacheConfig,
    CandleFeedConfig,
    ConfigManager,
    LoggingConfig,
    ProviderConfig,
    load_config_from_env,
)

__all__ = [
    "CacheConfig",
    "CandleFeedConfig",
    "ConfigManager",
    "LoggingConfig",
    "ProviderConfig",
    "load_config_from_env",
]
