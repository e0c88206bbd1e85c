"""Quote providers."""

from candlefeed.core.data.providers.base import QuoteProvider
from candlefeed.core.data.providers.yahoo import HttpConfig, YahooChartProvider, parse_chart_payload

__all__ = ["QuoteProvider", "HttpConfig", "YahooChartProvider", "parse_chart_payload"]
