"""calday - Calendar day arithmetic, day ranges and date range rules."""

from calday.backends import (
    Backend,
    PandasBackend,
    PolarsBackend,
    backend_for,
    get_backend,
)
from calday.config import (
    CalDayConfig,
    configure_calday,
    get_calday_config,
    get_first_week_day,
    reset_calday_config,
)
from calday.descriptors import (
    DateRangeDescriptor,
    DateRangeType,
    coerce_descriptor,
    is_date_in_ranges,
)
from calday.helpers import (
    YearRange,
    are_same_month,
    convert_to_date,
    convert_to_dates,
    generate_month,
    get_year_range,
    is_next_month,
    is_previous_month,
    month_weeks,
    parse_iso_date,
    weekday_number,
    weekdays,
)
from calday.logging import configure_logging, get_logger
from calday.model import (
    CalDayError,
    CalendarDay,
    DayInterval,
    DayParameter,
    InvalidIntervalError,
    days_in_month,
    is_leap,
    to_calendar_day,
)
from calday.ranges import CalendarRange, calendar_range

__all__ = [
    # Day model
    "CalendarDay",
    "DayInterval",
    "DayParameter",
    "days_in_month",
    "is_leap",
    "to_calendar_day",
    # Errors
    "CalDayError",
    "InvalidIntervalError",
    # Ranges
    "CalendarRange",
    "calendar_range",
    # Descriptors
    "DateRangeDescriptor",
    "DateRangeType",
    "coerce_descriptor",
    "is_date_in_ranges",
    # Month grids and converters
    "YearRange",
    "are_same_month",
    "convert_to_date",
    "convert_to_dates",
    "generate_month",
    "get_year_range",
    "is_next_month",
    "is_previous_month",
    "month_weeks",
    "parse_iso_date",
    "weekday_number",
    "weekdays",
    # Backends
    "Backend",
    "PandasBackend",
    "PolarsBackend",
    "backend_for",
    "get_backend",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "CalDayConfig",
    "configure_calday",
    "get_calday_config",
    "get_first_week_day",
    "reset_calday_config",
]
__version__ = "0.1.0"
