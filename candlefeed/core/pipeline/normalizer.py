"""Quote normalization: raw provider arrays -> daily-labelled candles."""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Context, Decimal

from candlefeed.core.logging import get_logger
from candlefeed.core.models.candle import Candle, RawQuoteBlock

logger = get_logger(__name__)

_CENT = Decimal("0.01")
# Wide enough to quantize any finite float to cents.
_ROUNDING = Context(prec=400)


def is_missing(value: float | None) -> bool:
    """True for provider gaps: ``None``, zero, NaN and infinities all count as missing."""
    if value is None or not value:
        return True
    return not math.isfinite(value)


def round_price(value: float) -> float:
    """Round a price to two decimals, half away from zero."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP, context=_ROUNDING))


def timestamp_to_date(timestamp: int) -> str:
    """Unix seconds -> UTC calendar date (``YYYY-MM-DD``)."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date().isoformat()


def normalize_quotes(block: RawQuoteBlock) -> list[Candle]:
    """Build one candle per complete raw index.

    Indices where any of open/high/low/close/volume is missing or non-finite,
    where volume is negative, or where the timestamp is not a representable
    date are skipped silently; they are never interpolated.
    """
    candles: list[Candle] = []
    dropped = 0
    for index, timestamp in enumerate(block.timestamp):
        fields = (
            block.open[index],
            block.high[index],
            block.low[index],
            block.close[index],
            block.volume[index],
        )
        if any(is_missing(value) for value in fields) or fields[4] < 0:
            dropped += 1
            continue

        try:
            day = timestamp_to_date(timestamp)
        except (OverflowError, ValueError, OSError):
            dropped += 1
            continue

        open_, high, low, close, volume = fields
        candles.append(
            Candle(
                time=day,
                open=round_price(open_),
                high=round_price(high),
                low=round_price(low),
                close=round_price(close),
                volume=int(volume),
            )
        )

    if dropped:
        logger.debug(f"Dropped {dropped} incomplete quote(s) out of {len(block)}")
    return candles
