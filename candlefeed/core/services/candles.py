"""Candle service: cache in front of provider -> pipeline."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone

from candlefeed.core.config.settings import CacheConfig, CandleFeedConfig, ProviderConfig
from candlefeed.core.data.cache import CacheKey, FifoCache
from candlefeed.core.data.providers import HttpConfig, QuoteProvider, YahooChartProvider
from candlefeed.core.exceptions import CandleFeedError, MissingParameterError
from candlefeed.core.logging import get_logger, log_context
from candlefeed.core.models.candle import Candle
from candlefeed.core.models.interval import DEFAULT_INTERVAL, DEFAULT_RANGE, period_for_interval
from candlefeed.core.pipeline import build_candles

logger = get_logger(__name__)

CandleCache = FifoCache[list[Candle]]


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def format_symbol(symbol: str | None, suffix: str = ".NS") -> str:
    """Normalize a ticker and append the exchange suffix once.

    Raises:
        MissingParameterError: ``symbol`` is empty or blank.
    """
    if symbol is None or not symbol.strip():
        raise MissingParameterError("symbol")
    formatted = symbol.strip().upper()
    if suffix and not formatted.endswith(suffix.upper()):
        formatted = f"{formatted}{suffix}"
    return formatted


class CandleService:
    """Chart-ready candles for one ``(symbol, range, interval)`` request.

    One instance owns one cache, so a process normally creates a single
    service and hands it to every request handler.
    """

    def __init__(
        self,
        provider: QuoteProvider | None = None,
        cache: CandleCache | None = None,
        clock: Callable[[], date] = utc_today,
        cache_config: CacheConfig | None = None,
        exchange_suffix: str = ".NS",
    ):
        self.cache_config = cache_config or CacheConfig()
        self.provider = provider or YahooChartProvider()
        self.cache = cache if cache is not None else FifoCache(self.cache_config.max_size)
        self.clock = clock
        self.exchange_suffix = exchange_suffix

    @classmethod
    def from_config(cls, config: CandleFeedConfig, **kwargs) -> CandleService:
        provider_config: ProviderConfig = config.provider
        kwargs.setdefault(
            "provider", YahooChartProvider(HttpConfig.from_provider_config(provider_config))
        )
        return cls(cache_config=config.cache, exchange_suffix=provider_config.exchange_suffix, **kwargs)

    async def get_candles(
        self,
        symbol: str | None,
        range: str | None = DEFAULT_RANGE,
        interval: str | None = DEFAULT_INTERVAL,
    ) -> list[Candle]:
        """Return candles ascending by ``time``.

        A cache hit returns the stored list itself without touching the
        provider. Errors are never cached and no partial result is returned.

        Raises:
            MissingParameterError: no symbol given
            UpstreamError: the provider failed
        """
        formatted = format_symbol(symbol, self.exchange_suffix)
        range = range or DEFAULT_RANGE
        interval = interval or DEFAULT_INTERVAL
        key = CacheKey(formatted, range, interval).key

        with log_context(symbol=formatted, range=range, interval=interval):
            if self.cache_config.enabled:
                cached = self.cache.get(key)
                if cached is not None:
                    logger.debug(f"Cache hit for {key}")
                    return cached
                logger.debug(f"Cache miss for {key}")

            try:
                block = await self.provider.fetch_quotes(formatted, range, interval)
            except CandleFeedError as e:
                logger.warning(f"Quote fetch failed ({e.error_code.value}): {e.message}")
                raise

            today = self.clock()
            candles = build_candles(block, interval, today)
            if self._should_store(interval):
                self.cache.set(key, candles)
            logger.info(f"Built {len(candles)} candle(s) from {len(block)} quote(s)")
            return candles

    def _should_store(self, interval: str) -> bool:
        if not self.cache_config.enabled:
            return False
        # An open weekly/monthly period keeps changing until it closes.
        if self.cache_config.skip_open_periods and period_for_interval(interval).is_aggregate:
            return False
        return True

    async def aclose(self) -> None:
        """Close the provider and drop every cached series."""
        await self.provider.aclose()
        self.cache.clear()
