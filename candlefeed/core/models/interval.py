"""Interval and period enums."""

from enum import Enum


class PeriodKind(str, Enum):
    """Calendar period a candle label is anchored to."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def is_aggregate(self) -> bool:
        return self is not PeriodKind.DAILY


class Interval(str, Enum):
    """Upstream interval values with special handling."""

    DAY_1 = "1d"
    WEEK_1 = "1wk"
    MONTH_1 = "1mo"

    @property
    def period(self) -> PeriodKind:
        return _INTERVAL_PERIODS[self]


_INTERVAL_PERIODS = {
    Interval.DAY_1: PeriodKind.DAILY,
    Interval.WEEK_1: PeriodKind.WEEKLY,
    Interval.MONTH_1: PeriodKind.MONTHLY,
}


def period_for_interval(interval: str) -> PeriodKind:
    """Map a raw interval string to its period.

    Unrecognized intervals are forwarded upstream unchanged and treated as
    daily, i.e. no re-anchoring and no trailing reconciliation.
    """
    try:
        return Interval(interval).period
    except ValueError:
        return PeriodKind.DAILY


# Interval buttons offered by the chart UI: preset -> (interval, range).
CHART_PRESETS: dict[str, tuple[str, str]] = {
    PeriodKind.DAILY.value: (Interval.DAY_1.value, "1y"),
    PeriodKind.WEEKLY.value: (Interval.WEEK_1.value, "5y"),
    PeriodKind.MONTHLY.value: (Interval.MONTH_1.value, "max"),
}

DEFAULT_RANGE = "2y"
DEFAULT_INTERVAL = Interval.DAY_1.value
