"""Tests for trailing-period reconciliation."""

from datetime import date

from candlefeed.core.models.candle import Candle
from candlefeed.core.models.interval import PeriodKind
from candlefeed.core.pipeline.reconciler import current_period_start, reconcile_trailing_period

# Wednesday; its week starts Monday 2024-03-11
TODAY = date(2024, 3, 13)


def _candle(time: str, open=10.0, high=12.0, low=9.0, close=11.0, volume=100) -> Candle:
    return Candle(time=time, open=open, high=high, low=low, close=close, volume=volume)


def test_current_period_start():
    assert current_period_start(TODAY, PeriodKind.WEEKLY) == date(2024, 3, 11)
    assert current_period_start(TODAY, PeriodKind.MONTHLY) == date(2024, 3, 1)
    assert current_period_start(date(2024, 3, 17), PeriodKind.WEEKLY) == date(2024, 3, 11)


class TestClosedLastPeriod:
    def test_weekly_appends_current_week_candle(self):
        candles = [
            _candle("2024-02-26", close=10.5),
            _candle("2024-03-04", open=10.5, high=13.0, low=10.0, close=12.25, volume=700),
        ]

        result = reconcile_trailing_period(candles, PeriodKind.WEEKLY, TODAY)

        assert len(result) == 3
        synthesized = result[-1]
        assert synthesized.time == "2024-03-11"
        assert synthesized.open == 12.25
        assert synthesized.close == 12.25
        assert synthesized.high == 12.25
        assert synthesized.low == 12.25
        assert synthesized.volume == 0

    def test_synthesized_candle_is_well_formed(self):
        candles = [_candle("2023-12-04", open=50.0, high=60.0, low=40.0, close=41.0)]

        bar = reconcile_trailing_period(candles, PeriodKind.MONTHLY, TODAY)[-1]

        assert bar.time == "2024-03-01"
        assert bar.low <= bar.open <= bar.high
        assert bar.low <= bar.close <= bar.high

    def test_previous_candles_untouched(self):
        previous = _candle("2024-03-04", high=13.0, volume=700)

        reconcile_trailing_period([previous], PeriodKind.WEEKLY, TODAY)

        assert previous.time == "2024-03-04"
        assert previous.high == 13.0
        assert previous.volume == 700


class TestOpenLastPeriod:
    def test_weekly_amends_in_place(self):
        last = _candle("2024-03-11", open=12.0, high=14.0, low=11.5, close=13.5, volume=300)
        candles = [_candle("2024-03-04"), last]

        result = reconcile_trailing_period(candles, PeriodKind.WEEKLY, TODAY)

        assert len(result) == 2
        assert result[-1] is last
        assert (last.open, last.high, last.low, last.close, last.volume) == (12.0, 14.0, 11.5, 13.5, 300)

    def test_folds_other_current_period_rows_without_double_count(self):
        # A partial row dated inside the current period ahead of the last one.
        early = _candle("2024-03-11", open=12.0, high=15.0, low=11.0, close=12.5, volume=200)
        last = _candle("2024-03-12", open=12.5, high=13.0, low=11.8, close=12.9, volume=50)

        result = reconcile_trailing_period([_candle("2024-03-04"), early, last], PeriodKind.WEEKLY, TODAY)

        assert len(result) == 3
        assert last.high == 15.0
        assert last.low == 11.0
        assert last.close == 12.9
        assert last.volume == 250

    def test_monthly_amend(self):
        last = _candle("2024-03-01", volume=42)

        result = reconcile_trailing_period([_candle("2024-02-01"), last], PeriodKind.MONTHLY, TODAY)

        assert len(result) == 2
        assert last.volume == 42


def test_empty_sequence_passes_through():
    assert reconcile_trailing_period([], PeriodKind.WEEKLY, TODAY) == []


def test_daily_is_noop():
    candles = [_candle("2020-01-01")]

    result = reconcile_trailing_period(candles, PeriodKind.DAILY, TODAY)

    assert result == [_candle("2020-01-01")]
