"""Fixed-date Brazilian national holidays shown on the admin calendar"""

from datetime import date, timedelta
from typing import NamedTuple, Optional


class HolidayEntry(NamedTuple):
    month: int
    day: int
    name: str


# Same table for every holiday region; the region setting is display-only
BRAZIL_NATIONAL_HOLIDAYS = (
    HolidayEntry(1, 1, "Confraternização Universal"),
    HolidayEntry(4, 21, "Tiradentes"),
    HolidayEntry(5, 1, "Dia do Trabalho"),
    HolidayEntry(9, 7, "Independência do Brasil"),
    HolidayEntry(10, 12, "Nossa Senhora Aparecida"),
    HolidayEntry(11, 2, "Finados"),
    HolidayEntry(11, 15, "Proclamação da República"),
    HolidayEntry(11, 20, "Dia da Consciência Negra"),
    HolidayEntry(12, 25, "Natal"),
)

_BY_MONTH_DAY = {(h.month, h.day): h for h in BRAZIL_NATIONAL_HOLIDAYS}


def get_holiday(day: date) -> Optional[HolidayEntry]:
    return _BY_MONTH_DAY.get((day.month, day.day))


def is_holiday(day: date) -> bool:
    return get_holiday(day) is not None


def holidays_between(start: date, end: date) -> list[tuple[date, HolidayEntry]]:
    """All holidays in the inclusive range [start, end], in date order"""
    result = []
    current = start
    while current <= end:
        holiday = get_holiday(current)
        if holiday:
            result.append((current, holiday))
        current += timedelta(days=1)
    return result
