"""candlefeed - 图表用K线数据服务

将行情源的原始OHLCV数组整理为按日/周/月对齐的K线序列，
并补齐仍在进行中的当前周期。
"""

from candlefeed.core.exceptions import CandleFeedError
from candlefeed.core.models import Candle, Interval, PeriodKind, RawQuoteBlock
from candlefeed.core.pipeline import build_candles
from candlefeed.core.services import CandleService

__version__ = "0.1.0"

__all__ = [
    "Candle",
    "CandleFeedError",
    "CandleService",
    "Interval",
    "PeriodKind",
    "RawQuoteBlock",
    "build_candles",
]
