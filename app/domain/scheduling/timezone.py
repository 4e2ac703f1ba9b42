"""
Timezone conversion helpers for the salon's configured zone.

Appointments are stored and transmitted as UTC instants; everything the salon
sees (working hours, "today", calendar days) is wall-clock time in the
configured IANA zone. All supported zones are fixed-offset Brazilian zones, so
conversions in both directions are unambiguous.

Naive datetimes are interpreted by context:
- ``to_local`` / ``local_day_bounds`` treat a naive value as UTC (the storage format)
- ``to_utc`` treats a naive value as wall-clock time in the given zone
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import NamedTuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError

UTC = timezone.utc

# Last representable millisecond of a local day
END_OF_DAY = time(23, 59, 59, 999000)


class DayBounds(NamedTuple):
    start: datetime
    end: datetime


def get_zone(tz_name: str) -> ZoneInfo:
    """Resolve an IANA zone id, raising ConfigurationError for unknown ids"""
    if not tz_name or not isinstance(tz_name, str):
        raise ConfigurationError("Fuso horário não configurado")
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Fuso horário desconhecido: {tz_name}") from e


def ensure_utc(instant: datetime) -> datetime:
    """Return an aware UTC datetime; naive input is taken to already be UTC"""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def to_naive_utc(instant: datetime) -> datetime:
    """Normalize an instant to the naive-UTC form used by the database columns"""
    return ensure_utc(instant).replace(tzinfo=None)


def to_local(utc_instant: datetime, tz_name: str) -> datetime:
    """Convert an absolute instant to an aware wall-clock datetime in ``tz_name``"""
    return ensure_utc(utc_instant).astimezone(get_zone(tz_name))


def to_utc(local_instant: datetime, tz_name: str) -> datetime:
    """Convert a wall-clock datetime in ``tz_name`` to an aware UTC datetime"""
    zone = get_zone(tz_name)
    if local_instant.tzinfo is None:
        local_instant = local_instant.replace(tzinfo=zone)
    return local_instant.astimezone(UTC)


def local_date(instant: datetime, tz_name: str) -> date:
    return to_local(instant, tz_name).date()


def local_day_bounds(instant: datetime, tz_name: str) -> DayBounds:
    """
    UTC instants of local midnight and local 23:59:59.999 of the instant's local day.

    Used to turn "appointments on local calendar day X" into a UTC range query.
    """
    day = local_date(instant, tz_name)
    return date_bounds(day, tz_name)


def date_bounds(day: date, tz_name: str) -> DayBounds:
    """UTC bounds of a local calendar date"""
    return DayBounds(
        start=to_utc(datetime.combine(day, time.min), tz_name),
        end=to_utc(datetime.combine(day, END_OF_DAY), tz_name),
    )


def is_same_local_day(first: datetime, second: datetime, tz_name: str) -> bool:
    return local_date(first, tz_name) == local_date(second, tz_name)


def format_local(instant: datetime, tz_name: str, fmt: str = "%d/%m/%Y %H:%M") -> str:
    return to_local(instant, tz_name).strftime(fmt)


def hhmm(local_instant: datetime) -> str:
    """Zero-padded "HH:MM" of a wall-clock datetime (seconds are truncated)"""
    return local_instant.strftime("%H:%M")


def minutes_between(start: str, end: str) -> int:
    """Minutes between two "HH:MM" strings on the same day"""
    start_h, start_m = (int(part) for part in start.split(":"))
    end_h, end_m = (int(part) for part in end.split(":"))
    return int(timedelta(hours=end_h - start_h, minutes=end_m - start_m).total_seconds() // 60)
