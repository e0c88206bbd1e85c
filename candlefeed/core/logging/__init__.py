"""Logging utilities."""

from candlefeed.core.logging.config import LogConfig
from candlefeed.core.logging.logger import (
    configure_logging,
    current_trace_id,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "configure_logging",
    "current_trace_id",
    "get_logger",
    "log_context",
    "logger",
]
