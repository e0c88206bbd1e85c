"""Candle pipeline: normalize -> re-anchor -> reconcile."""

from datetime import date

from candlefeed.core.models.candle import Candle, RawQuoteBlock
from candlefeed.core.models.interval import period_for_interval
from candlefeed.core.pipeline.anchoring import anchor_date, merge_same_anchor, reanchor
from candlefeed.core.pipeline.normalizer import normalize_quotes, round_price
from candlefeed.core.pipeline.reconciler import current_period_start, reconcile_trailing_period


def build_candles(block: RawQuoteBlock, interval: str, today: date) -> list[Candle]:
    """Run the full pipeline on one raw quote block."""
    period = period_for_interval(interval)
    candles = normalize_quotes(block)
    if period.is_aggregate:
        candles = merge_same_anchor(reanchor(candles, period))
    return reconcile_trailing_period(candles, period, today)


__all__ = [
    "anchor_date",
    "build_candles",
    "current_period_start",
    "merge_same_anchor",
    "normalize_quotes",
    "reanchor",
    "reconcile_trailing_period",
    "round_price",
]
