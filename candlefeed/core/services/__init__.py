"""Application services."""

from candlefeed.core.services.candles import CandleService, format_symbol, utc_today

__all__ = ["CandleService", "format_symbol", "utc_today"]
