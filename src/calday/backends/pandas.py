"""Pandas backend implementation."""

from collections.abc import Iterable
from typing import Any

import pandas as pd

from calday.descriptors import (
    DateRangeDescriptor,
    DateRangeType,
    DescriptorLike,
    well_formed_descriptors,
)
from calday.model import CalendarDay, DayParameter, to_calendar_day


def _build_pandas_condition(
    dates: pd.Series, descriptor: DateRangeDescriptor
) -> pd.Series:
    """Convert a descriptor to a boolean mask over a normalised date column.

    Raises:
        ValueError: If the descriptor type is not recognized.
    """
    bounds = [pd.Timestamp(day.native) for day in descriptor.days]
    kind = descriptor.type
    if kind == DateRangeType.AFTER:
        return dates > bounds[0]
    elif kind == DateRangeType.BEFORE:
        return dates < bounds[0]
    elif kind == DateRangeType.BETWEEN:
        low, high = sorted((bounds[0], bounds[-1]))
        return (dates >= low) & (dates <= high)
    elif kind == DateRangeType.SPECIFIC:
        return dates.isin(bounds)
    elif kind == DateRangeType.WEEKDAYS:
        return dates.dt.dayofweek < 5  # Mon-Fri = 0-4
    elif kind == DateRangeType.WEEKENDS:
        return dates.dt.dayofweek >= 5
    else:
        raise ValueError(f"Unknown date range type: {kind}")


class PandasBackend:
    """Backend implementation for pandas Series."""

    def from_days(
        self, days: Iterable[DayParameter], name: str = "date"
    ) -> pd.Series:
        """Materialise days into a datetime64 Series at midnight."""
        values = [to_calendar_day(day).native for day in days]
        return pd.Series(values, dtype="datetime64[ns]", name=name)

    def to_days(self, series: Any) -> list[CalendarDay]:
        """Convert a datetime Series or DatetimeIndex to CalendarDay values."""
        return [CalendarDay.from_date(ts) for ts in pd.Series(series).dropna()]

    def in_ranges(
        self,
        series: Any,
        ranges: Iterable[DescriptorLike] | None,
        name: str = "in_ranges",
    ) -> pd.Series:
        """Element-wise range membership over a datetime Series.

        Time of day is ignored and timezone-aware values are compared by
        their wall-clock date.
        """
        dates = pd.to_datetime(pd.Series(series))
        if dates.dt.tz is not None:
            dates = dates.dt.tz_localize(None)
        dates = dates.dt.normalize()

        mask = pd.Series(False, index=dates.index, name=name)
        for descriptor in well_formed_descriptors(ranges):
            mask |= _build_pandas_condition(dates, descriptor)
        return mask
