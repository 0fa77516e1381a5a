"""Day range generation."""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator

from calday.model import (
    INTERVALS,
    CalendarDay,
    DayInterval,
    DayParameter,
    InvalidIntervalError,
    to_calendar_day,
)


@dataclass(frozen=True)
class CalendarRange:
    """Days from ``start`` (inclusive) towards ``end`` (exclusive) by ``unit``.

    ``end`` is either a day or a signed count of units. A negative count, or
    an end day before ``start``, walks backwards. Each iteration starts
    over, so the same range can be consumed any number of times.
    """

    start: DayParameter
    end: DayParameter | int
    unit: DayInterval = "day"

    def __post_init__(self) -> None:
        if self.unit not in INTERVALS:
            raise InvalidIntervalError(self.unit)

    def bounds(self) -> tuple[CalendarDay, CalendarDay]:
        """Resolve the first day and the excluded end day."""
        low = to_calendar_day(self.start)
        if isinstance(self.end, Integral):
            return low, low.add(self.unit, int(self.end))
        return low, to_calendar_day(self.end)

    @property
    def reverse(self) -> bool:
        low, high = self.bounds()
        return high < low

    def __iter__(self) -> Iterator[CalendarDay]:
        low, high = self.bounds()
        reverse = high < low
        step = -1 if reverse else 1

        while low > high if reverse else low < high:
            yield low
            low = low.add(self.unit, step)

    def __len__(self) -> int:
        if self.unit == "day":
            low, high = self.bounds()
            return abs(high.to_date().toordinal() - low.to_date().toordinal())
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        low, high = self.bounds()
        return low != high

    def __contains__(self, key: object) -> bool:
        try:
            value = to_calendar_day(key)  # type: ignore[arg-type]
        except TypeError:
            return False

        if self.unit == "day":
            low, high = self.bounds()
            if high < low:
                return high < value <= low
            return low <= value < high
        return any(day == value for day in self)

    def __str__(self) -> str:
        low, high = self.bounds()
        return f"{low}..{high} by {self.unit}"


def calendar_range(
    start: DayParameter,
    end: DayParameter | int,
    unit: DayInterval = "day",
) -> Iterator[CalendarDay]:
    """Return an iterator over the days between ``start`` and ``end``.

    Args:
        start: First day yielded.
        end: Excluded end day, or a signed number of ``unit`` steps.
        unit: Step size, "day" by default.

    Raises:
        InvalidIntervalError: If ``unit`` is not a known interval.

    Example:
        >>> [str(d) for d in calendar_range(CalendarDay(2024, 0, 11), 3)]
        ['2024-01-11', '2024-01-12', '2024-01-13']
    """
    return iter(CalendarRange(start, end, unit))
