"""Data models."""

from candlefeed.core.models.candle import Candle, RawQuoteBlock
from candlefeed.core.models.interval import (
    CHART_PRESETS,
    DEFAULT_INTERVAL,
    DEFAULT_RANGE,
    Interval,
    PeriodKind,
    period_for_interval,
)

__all__ = [
    "Candle",
    "RawQuoteBlock",
    "Interval",
    "PeriodKind",
    "period_for_interval",
    "CHART_PRESETS",
    "DEFAULT_INTERVAL",
    "DEFAULT_RANGE",
]
