"""Shared builders and doubles for candlefeed tests."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from candlefeed.core.data.providers.base import QuoteProvider
from candlefeed.core.models.candle import RawQuoteBlock


def ts(day: date) -> int:
    """Unix seconds at 09:15 UTC on ``day``."""
    return int(datetime(day.year, day.month, day.day, 9, 15, tzinfo=timezone.utc).timestamp())


def chart_payload(block: RawQuoteBlock | None = None, **quote_overrides: Any) -> dict[str, Any]:
    """Wrap a block into a Yahoo chart API document."""
    block = block or RawQuoteBlock(
        timestamp=[1700000000, 1700086400],
        open=[100, 102],
        high=[105, 106],
        low=[99, 101],
        close=[104, 103],
        volume=[1000, 1100],
    )
    quote = {
        "open": block.open,
        "high": block.high,
        "low": block.low,
        "close": block.close,
        "volume": block.volume,
        **quote_overrides,
    }
    return {
        "chart": {
            "result": [
                {
                    "meta": {"symbol": "TEST.NS"},
                    "timestamp": block.timestamp,
                    "indicators": {"quote": [quote], "adjclose": [{"adjclose": block.close}]},
                }
            ],
            "error": None,
        }
    }


class StubProvider(QuoteProvider):
    """Records calls and replays a fixed block or error."""

    name = "stub"

    def __init__(self, block: RawQuoteBlock | None = None, error: Exception | None = None):
        self.block = block
        self.error = error
        self.calls: list[tuple[str, str, str]] = []
        self.closed = False

    async def fetch_quotes(self, symbol: str, range: str, interval: str) -> RawQuoteBlock:
        self.calls.append((symbol, range, interval))
        if self.error is not None:
            raise self.error
        assert self.block is not None
        return self.block.model_copy(deep=True)

    async def aclose(self) -> None:
        self.closed = True
