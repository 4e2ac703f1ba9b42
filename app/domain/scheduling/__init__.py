"""
Scheduling Domain

Appointment-time validation against business hours, timezone helpers for the
salon's configured zone, and the national holiday table.

Everything in this package is pure: no database access, no I/O, no module
state that depends on the current settings. Callers load the current
``SystemSettings`` row, build a ``BusinessHoursConfig`` and pass it in.
"""

from .exceptions import ConfigurationError
from .holidays import BRAZIL_NATIONAL_HOLIDAYS, HolidayEntry, get_holiday, holidays_between, is_holiday
from .timezone import (
    DayBounds,
    date_bounds,
    ensure_utc,
    format_local,
    get_zone,
    hhmm,
    is_same_local_day,
    local_date,
    local_day_bounds,
    minutes_between,
    to_local,
    to_naive_utc,
    to_utc,
)
from .validator import (
    HOLIDAY_REGIONS,
    SUPPORTED_TIMEZONES,
    WEEKDAY_NAMES,
    BusinessHoursConfig,
    ValidationResult,
    WorkingHours,
    is_valid_hhmm,
    is_within_working_hours,
    is_working_day,
    validate_appointment_time,
    weekday_index,
)

__all__ = [
    "BRAZIL_NATIONAL_HOLIDAYS",
    "HOLIDAY_REGIONS",
    "SUPPORTED_TIMEZONES",
    "WEEKDAY_NAMES",
    "BusinessHoursConfig",
    "ConfigurationError",
    "DayBounds",
    "HolidayEntry",
    "ValidationResult",
    "WorkingHours",
    "date_bounds",
    "ensure_utc",
    "format_local",
    "get_holiday",
    "get_zone",
    "hhmm",
    "holidays_between",
    "is_holiday",
    "is_same_local_day",
    "is_valid_hhmm",
    "is_within_working_hours",
    "is_working_day",
    "local_date",
    "local_day_bounds",
    "minutes_between",
    "to_local",
    "to_naive_utc",
    "to_utc",
    "validate_appointment_time",
    "weekday_index",
]
