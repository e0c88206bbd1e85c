"""Quote provider contract."""

from abc import ABC, abstractmethod

from candlefeed.core.models.candle import RawQuoteBlock


class QuoteProvider(ABC):
    """Source of raw OHLCV blocks for one symbol.

    Implementations raise :class:`~candlefeed.core.exceptions.UpstreamError`
    subclasses on failure and never retry.
    """

    name: str = "provider"

    @abstractmethod
    async def fetch_quotes(self, symbol: str, range: str, interval: str) -> RawQuoteBlock:
        """获取原始行情数据."""

    async def aclose(self) -> None:
        """Release network resources."""
