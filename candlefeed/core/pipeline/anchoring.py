"""Period re-anchoring of candle labels."""

from datetime import date, timedelta

from candlefeed.core.models.candle import Candle
from candlefeed.core.models.interval import PeriodKind


def anchor_date(day: date, period: PeriodKind) -> date:
    """Return the canonical start of the period containing ``day``.

    Weeks start on Monday, months on the 1st. Daily dates are returned as-is.
    """
    if period is PeriodKind.WEEKLY:
        return day - timedelta(days=day.weekday())
    if period is PeriodKind.MONTHLY:
        return day.replace(day=1)
    return day


def reanchor(candles: list[Candle], period: PeriodKind) -> list[Candle]:
    """Rewrite each candle's ``time`` to its period anchor, in place."""
    if not period.is_aggregate:
        return candles
    for candle in candles:
        candle.time = anchor_date(date.fromisoformat(candle.time), period).isoformat()
    return candles


def merge_same_anchor(candles: list[Candle]) -> list[Candle]:
    """Collapse candles sharing a ``time`` label into one bar.

    Upstream is expected to deliver one row per requested interval, in which
    case this is a no-op. When it does not, rows with the same anchor are
    merged with first open, max high, min low, last close and summed volume,
    so the result is strictly ascending with unique labels.
    """
    merged: list[Candle] = []
    for candle in sorted(candles, key=lambda c: c.time):
        if merged and merged[-1].time == candle.time:
            bar = merged[-1]
            bar.high = max(bar.high, candle.high)
            bar.low = min(bar.low, candle.low)
            bar.close = candle.close
            bar.volume += candle.volume
        else:
            merged.append(candle.model_copy())
    return merged
