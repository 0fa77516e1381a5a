"""Month grids, month relations and native date converters."""

import datetime as dt
import re
from typing import Iterator, NamedTuple, Sequence

from calday.config import DAYS_IN_WEEK, get_calday_config, get_first_week_day
from calday.model import CalendarDay, DayParameter, to_calendar_day
from calday.ranges import calendar_range

DAYS_MAP = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}

_DATE_PREFIX = re.compile(r"^\d{4}")
_TIME_PREFIX = re.compile(r"^\d{2}")


class YearRange(NamedTuple):
    """Inclusive span of years shown on one page of a year picker."""

    start: int
    end: int


def weekday_number(name: str) -> int:
    """Map a week day name ("sunday" ... "saturday") to 0 ... 6."""
    try:
        return DAYS_MAP[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown week day: {name!r}") from None


def weekdays(first_week_day: int | None = None) -> list[int]:
    """Return the week day numbers of one week starting at ``first_week_day``.

    first_week_day=0 (Sunday) -> [0, 1, 2, 3, 4, 5, 6]
    first_week_day=1 (Monday) -> [1, 2, 3, 4, 5, 6, 0]
    """
    if first_week_day is None:
        first_week_day = get_first_week_day()
    return [(first_week_day + i) % DAYS_IN_WEEK for i in range(DAYS_IN_WEEK)]


def generate_month(
    value: DayParameter, first_week_day: int | None = None
) -> Iterator[CalendarDay]:
    """Yield the days of the month grid containing ``value``.

    The grid starts on the last ``first_week_day`` on or before the 1st of
    the month and covers ``month_grid_days`` days (6 full weeks by default),
    so it includes trailing days of the previous month and leading days of
    the next one.
    """
    config = get_calday_config()
    if first_week_day is None:
        first_week_day = config.first_week_day

    day = to_calendar_day(value)
    start = CalendarDay(day.year, day.month)
    offset = (start.day - first_week_day) % DAYS_IN_WEEK
    yield from calendar_range(start.add("day", -offset), config.month_grid_days)


def month_weeks(
    value: DayParameter, first_week_day: int | None = None
) -> list[list[CalendarDay]]:
    """Return the month grid containing ``value`` split into weeks."""
    days = list(generate_month(value, first_week_day))
    return [days[i:i + DAYS_IN_WEEK] for i in range(0, len(days), DAYS_IN_WEEK)]


def are_same_month(first: DayParameter, second: DayParameter) -> bool:
    a, b = to_calendar_day(first), to_calendar_day(second)
    return a.year == b.year and a.month == b.month


def is_next_month(target: DayParameter, origin: DayParameter) -> bool:
    """Whether ``target`` falls in a month after the month of ``origin``."""
    a, b = to_calendar_day(target), to_calendar_day(origin)
    return a.month > b.month if a.year == b.year else a.year > b.year


def is_previous_month(target: DayParameter, origin: DayParameter) -> bool:
    """Whether ``target`` falls in a month before the month of ``origin``."""
    a, b = to_calendar_day(target), to_calendar_day(origin)
    return a.month < b.month if a.year == b.year else a.year < b.year


def get_year_range(value: DayParameter, size: int) -> YearRange:
    """Return the page of ``size`` years containing the year of ``value``."""
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    year = to_calendar_day(value).year
    start = (year // size) * size
    return YearRange(start, start + size - 1)


def parse_iso_date(text: str) -> dt.datetime | None:
    """Parse an ISO 8601 date, date-time or time string.

    Date-only strings resolve to local midnight. Time-only strings
    ("14:30", "09:15:00") resolve against today's date. Returns None when
    the string cannot be parsed.
    """
    if _DATE_PREFIX.match(text):
        value = text if "T" in text else f"{text}T00:00:00"
    elif _TIME_PREFIX.match(text):
        value = f"{dt.date.today().isoformat()}T{text}"
    else:
        return None

    try:
        return dt.datetime.fromisoformat(value)
    except ValueError:
        return None


def convert_to_date(value: dt.date | str | None) -> dt.date | None:
    """Convert a native date or ISO string to a native date value.

    Dates are returned unchanged, strings go through ``parse_iso_date``,
    and empty values or unparsable strings give None.
    """
    if not value:
        return None
    if isinstance(value, str):
        return parse_iso_date(value)
    return value


def convert_to_dates(
    value: Sequence[dt.date | str] | str | None,
) -> list[dt.date] | None:
    """Convert a comma separated string or a sequence into native dates.

    Entries that cannot be converted are skipped.
    """
    if not value:
        return None

    parts = value.split(",") if isinstance(value, str) else value
    dates = []
    for part in parts:
        date = convert_to_date(part.strip() if isinstance(part, str) else part)
        if date is not None:
            dates.append(date)
    return dates
