"""Trailing-period reconciliation for weekly and monthly series.

The last bar of a weekly/monthly chart has to describe the period that is
still open *today*. Two situations arise:

* the newest row belongs to an already closed period: a bar for the current
  period is synthesized, opening at the previous close;
* the newest row already is the current period (a partial row): it is
  amended with any other rows that fall inside the current period.
"""

from datetime import date

from candlefeed.core.logging import get_logger
from candlefeed.core.models.candle import Candle
from candlefeed.core.models.interval import PeriodKind
from candlefeed.core.pipeline.anchoring import anchor_date

logger = get_logger(__name__)


def current_period_start(today: date, period: PeriodKind) -> date:
    return anchor_date(today, period)


def reconcile_trailing_period(candles: list[Candle], period: PeriodKind, today: date) -> list[Candle]:
    """Make the trailing candle reflect the still-open period.

    Args:
        candles: re-anchored candles in ascending order
        period: weekly or monthly; daily series are returned untouched
        today: current UTC date

    Returns:
        The same list, either with one appended candle or with the last
        candle amended.
    """
    if not period.is_aggregate or not candles:
        return candles

    period_start = current_period_start(today, period)
    last = candles[-1]

    if date.fromisoformat(last.time) < period_start:
        in_period = [c for c in candles if date.fromisoformat(c.time) >= period_start]
        # Seeded with the carried close; the current period may have no rows yet.
        candles.append(
            Candle(
                time=period_start.isoformat(),
                open=last.close,
                high=max([last.close, *(c.high for c in in_period)]),
                low=min([last.close, *(c.low for c in in_period)]),
                close=last.close,
                volume=sum(c.volume for c in in_period),
            )
        )
        logger.debug(f"Synthesized {period.value} candle for {period_start.isoformat()}")
        return candles

    others = [c for c in candles[:-1] if date.fromisoformat(c.time) >= period_start]
    last.high = max([last.high, *(c.high for c in others)])
    last.low = min([last.low, *(c.low for c in others)])
    last.volume += sum(c.volume for c in others)
    return candles
