"""Module-level configuration for calday defaults."""

import threading
from dataclasses import dataclass

DAYS_IN_WEEK = 7


@dataclass
class CalDayConfig:
    """Configuration for calday defaults."""

    first_week_day: int = 0  # 0 = Sunday
    month_grid_days: int = 6 * DAYS_IN_WEEK


# Module-level singleton
_calday_config: CalDayConfig | None = None
_config_lock = threading.Lock()


def get_calday_config() -> CalDayConfig:
    """Get the global calday configuration singleton."""
    global _calday_config
    if _calday_config is None:
        with _config_lock:
            if _calday_config is None:
                _calday_config = CalDayConfig()
    return _calday_config


def configure_calday(
    first_week_day: int | None = None,
    month_grid_days: int | None = None,
) -> None:
    """Configure default calday settings.

    Args:
        first_week_day: Day the week starts on for month grids
            (0 = Sunday ... 6 = Saturday). Values are taken modulo 7.
        month_grid_days: Number of days rendered by a month grid. Must be
            a positive multiple of 7.

    Example:
        from calday import configure_calday, generate_month

        # Weeks start on Monday from now on
        configure_calday(first_week_day=1)

        days = list(generate_month(CalendarDay(2024, 0)))
    """
    if month_grid_days is not None and (
        month_grid_days <= 0 or month_grid_days % DAYS_IN_WEEK
    ):
        raise ValueError(
            f"month_grid_days must be a positive multiple of {DAYS_IN_WEEK}, "
            f"got {month_grid_days}"
        )

    config = get_calday_config()
    with _config_lock:
        if first_week_day is not None:
            config.first_week_day = first_week_day % DAYS_IN_WEEK
        if month_grid_days is not None:
            config.month_grid_days = month_grid_days


def get_first_week_day() -> int:
    """Get the configured first day of the week."""
    return get_calday_config().first_week_day


def reset_calday_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calday_config
    with _config_lock:
        _calday_config = CalDayConfig()
