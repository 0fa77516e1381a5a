"""Polars backend implementation."""

from collections.abc import Iterable
from typing import Any

import polars as pl

from calday.descriptors import (
    DateRangeDescriptor,
    DateRangeType,
    DescriptorLike,
    well_formed_descriptors,
)
from calday.model import CalendarDay, DayParameter, to_calendar_day


def _build_polars_condition(
    dates: pl.Series, descriptor: DateRangeDescriptor
) -> pl.Series:
    """Convert a descriptor to a boolean mask over a Date Series.

    Raises:
        ValueError: If the descriptor type is not recognized.
    """
    bounds = [day.to_date() for day in descriptor.days]
    kind = descriptor.type
    if kind == DateRangeType.AFTER:
        return dates > bounds[0]
    elif kind == DateRangeType.BEFORE:
        return dates < bounds[0]
    elif kind == DateRangeType.BETWEEN:
        low, high = sorted((bounds[0], bounds[-1]))
        return (dates >= low) & (dates <= high)
    elif kind == DateRangeType.SPECIFIC:
        if not bounds:
            return pl.Series([False] * len(dates), dtype=pl.Boolean)
        return dates.is_in(pl.Series(bounds, dtype=pl.Date))
    elif kind == DateRangeType.WEEKDAYS:
        return dates.dt.weekday() <= 5  # Mon-Fri = 1-5
    elif kind == DateRangeType.WEEKENDS:
        return dates.dt.weekday() >= 6
    else:
        raise ValueError(f"Unknown date range type: {kind}")


class PolarsBackend:
    """Backend implementation for polars Series."""

    def from_days(
        self, days: Iterable[DayParameter], name: str = "date"
    ) -> pl.Series:
        """Materialise days into a Date Series."""
        values = [to_calendar_day(day).to_date() for day in days]
        return pl.Series(name, values, dtype=pl.Date)

    def to_days(self, series: Any) -> list[CalendarDay]:
        """Convert a Date or Datetime Series to CalendarDay values."""
        dates = series.drop_nulls()
        if dates.dtype != pl.Date:
            dates = dates.cast(pl.Date)
        return [CalendarDay.from_date(value) for value in dates.to_list()]

    def in_ranges(
        self,
        series: Any,
        ranges: Iterable[DescriptorLike] | None,
        name: str = "in_ranges",
    ) -> pl.Series:
        """Element-wise range membership over a Date or Datetime Series.

        Null dates never match.
        """
        dates = series if series.dtype == pl.Date else series.cast(pl.Date)

        mask = pl.Series(name, [False] * len(dates), dtype=pl.Boolean)
        for descriptor in well_formed_descriptors(ranges):
            mask = mask | _build_polars_condition(dates, descriptor)
        return mask.fill_null(False).alias(name)
