"""
Yahoo Finance chart API provider.

Requests ``/v8/finance/chart/{symbol}`` and unpacks ``chart.result[0]`` into a
:class:`RawQuoteBlock`. Transport failures and error statuses are mapped onto
the candlefeed error taxonomy; nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError

from candlefeed.core.config.settings import BROWSER_USER_AGENT, ProviderConfig
from candlefeed.core.data.providers.base import QuoteProvider
from candlefeed.core.exceptions import (
    UnknownUpstreamError,
    UpstreamMalformedError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
)
from candlefeed.core.logging import get_logger
from candlefeed.core.models.candle import RawQuoteBlock

logger = get_logger(__name__)


@dataclass
class HttpConfig:
    """Configuration for HTTP client behavior."""

    base_url: str = "https://query1.finance.yahoo.com"
    timeout: float = 30.0
    user_agent: str = BROWSER_USER_AGENT
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate HTTP configuration."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_provider_config(cls, config: ProviderConfig) -> HttpConfig:
        return cls(base_url=config.base_url, timeout=config.timeout, user_agent=config.user_agent)


class YahooChartProvider(QuoteProvider):
    """Fetches daily/weekly/monthly OHLCV arrays from Yahoo Finance."""

    name = "yahoo"

    def __init__(
        self,
        http_config: HttpConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.http_config = http_config or HttpConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> YahooChartProvider:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"User-Agent": self.http_config.user_agent, **self.http_config.headers}
            self._client = httpx.AsyncClient(
                base_url=self.http_config.base_url,
                timeout=httpx.Timeout(self.http_config.timeout),
                follow_redirects=True,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client and cleanup resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_quotes(self, symbol: str, range: str, interval: str) -> RawQuoteBlock:
        client = self._ensure_client()
        params = {
            "range": range,
            "interval": interval,
            "events": "history",
            "includeAdjustedClose": "true",
        }

        try:
            response = await client.get(f"/v8/finance/chart/{symbol}", params=params)
        except httpx.HTTPError as e:
            logger.bind(symbol=symbol).error(f"Transport error from Yahoo Finance: {e}")
            raise UnknownUpstreamError(str(e) or type(e).__name__, symbol) from e

        if response.status_code == 404:
            raise UpstreamNotFoundError(symbol)
        if response.status_code == 429:
            raise UpstreamRateLimitedError(symbol, _retry_after(response))
        if response.is_error:
            logger.bind(symbol=symbol).error(f"Yahoo Finance responded {response.status_code}")
            raise UnknownUpstreamError(f"HTTP {response.status_code}: {response.text[:200]}", symbol)

        try:
            payload = response.json()
        except ValueError as e:
            raise UnknownUpstreamError(f"Invalid JSON from upstream: {e}", symbol) from e

        return parse_chart_payload(payload, symbol)


def _retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("Retry-After")
    if value is not None and value.isdigit():
        return int(value)
    return None


def parse_chart_payload(payload: Any, symbol: str | None = None) -> RawQuoteBlock:
    """Extract the quote block from a chart API document.

    Raises:
        UpstreamMalformedError: ``chart.result[0]`` or its timestamp/quote
            arrays are missing.
    """
    try:
        result = payload["chart"]["result"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamMalformedError(symbol) from e
    if not result:
        raise UpstreamMalformedError(symbol)

    try:
        timestamps = result["timestamp"]
        indicators = result["indicators"]
        quote = indicators["quote"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamMalformedError(symbol) from e

    adjclose = None
    adjclose_blocks = indicators.get("adjclose") or []
    if adjclose_blocks and isinstance(adjclose_blocks[0], dict):
        adjclose = adjclose_blocks[0].get("adjclose")

    try:
        return RawQuoteBlock(
            timestamp=timestamps,
            open=quote.get("open") or [],
            high=quote.get("high") or [],
            low=quote.get("low") or [],
            close=quote.get("close") or [],
            volume=quote.get("volume") or [],
            adjclose=adjclose,
        )
    except (ValidationError, AttributeError) as e:
        raise UpstreamMalformedError(symbol) from e
