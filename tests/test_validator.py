"""Tests for appointment time validation against business hours."""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from app.domain.scheduling import (
    BusinessHoursConfig,
    ConfigurationError,
    ValidationResult,
    WorkingHours,
    is_within_working_hours,
    is_working_day,
    to_local,
    to_utc,
    validate_appointment_time,
    weekday_index,
)

SAO_PAULO = "America/Sao_Paulo"


@pytest.fixture
def weekday_config() -> BusinessHoursConfig:
    """Monday to Friday, 08:00 to 18:00 in São Paulo."""
    return BusinessHoursConfig.build(
        timezone=SAO_PAULO,
        working_days=[1, 2, 3, 4, 5],
        working_hours={"start": "08:00", "end": "18:00"},
    )


def local(year, month, day, hour, minute=0, tz_name=SAO_PAULO) -> datetime:
    """UTC instant of a São Paulo wall-clock time."""
    return to_utc(datetime(year, month, day, hour, minute), tz_name)


# 2025-01-06 is a Monday


def test_monday_morning_is_valid(weekday_config):
    result = validate_appointment_time(local(2025, 1, 6, 9, 30), weekday_config)

    assert result == ValidationResult(valid=True)
    assert result.to_dict() == {"valid": True}


def test_monday_evening_is_outside_working_hours(weekday_config):
    result = validate_appointment_time(local(2025, 1, 6, 19, 0), weekday_config)

    assert not result.valid
    assert "08:00 às 18:00" in result.message
    assert result.message == "Horário fora do funcionamento (08:00 às 18:00)"


def test_sunday_is_not_a_working_day(weekday_config):
    result = validate_appointment_time(local(2025, 1, 5, 10, 0), weekday_config)

    assert not result.valid
    assert result.message == "Domingo não é um dia de funcionamento"


def test_saturday_is_named_in_rejection(weekday_config):
    result = validate_appointment_time(local(2025, 1, 4, 10, 0), weekday_config)

    assert result.message == "Sábado não é um dia de funcionamento"


def test_opening_time_is_valid_every_day():
    config = BusinessHoursConfig.build(
        timezone=SAO_PAULO,
        working_days=range(7),
        working_hours={"start": "08:00", "end": "18:00"},
    )

    for offset in range(7):
        day = 5 + offset
        assert validate_appointment_time(local(2025, 1, day, 8, 0), config).valid


@pytest.mark.parametrize(
    "hour,minute,expected",
    [
        (7, 59, False),
        (8, 0, True),
        (18, 0, True),
        (18, 1, False),
    ],
)
def test_working_hours_boundaries_are_inclusive(weekday_config, hour, minute, expected):
    assert validate_appointment_time(local(2025, 1, 6, hour, minute), weekday_config).valid is expected


def test_seconds_are_truncated_at_closing_time(weekday_config):
    instant = local(2025, 1, 6, 18, 0) + timedelta(seconds=59)

    assert validate_appointment_time(instant, weekday_config).valid


def test_naive_instant_is_treated_as_utc(weekday_config):
    # 12:30 UTC is 09:30 in São Paulo
    assert validate_appointment_time(datetime(2025, 1, 6, 12, 30), weekday_config).valid
    # 22:30 UTC is 19:30 in São Paulo
    assert not validate_appointment_time(datetime(2025, 1, 6, 22, 30), weekday_config).valid


def test_utc_day_differs_from_local_day(weekday_config):
    # Saturday 01:00 UTC is still Friday 22:00 local: working day, but after hours
    result = validate_appointment_time(datetime(2025, 1, 11, 1, 0, tzinfo=timezone.utc), weekday_config)

    assert result.message == "Horário fora do funcionamento (08:00 às 18:00)"


def test_validation_is_deterministic(weekday_config):
    instant = local(2025, 1, 6, 19, 0)

    first = validate_appointment_time(instant, weekday_config)
    second = validate_appointment_time(instant, weekday_config)

    assert first == second


def test_holidays_do_not_reject_bookings(weekday_config):
    # 2025-12-25 (Natal) is a Thursday
    assert validate_appointment_time(local(2025, 12, 25, 10, 0), weekday_config).valid


def test_other_timezone_uses_its_own_wall_clock():
    config = BusinessHoursConfig.build(
        timezone="America/Manaus",
        working_days=[1, 2, 3, 4, 5],
        working_hours={"start": "08:00", "end": "18:00"},
    )

    # 21:30 UTC is 17:30 in Manaus but 18:30 in São Paulo
    assert validate_appointment_time(datetime(2025, 1, 6, 21, 30, tzinfo=timezone.utc), config).valid


def test_weekday_index_sunday_is_zero():
    assert weekday_index(datetime(2025, 1, 5)) == 0
    assert weekday_index(datetime(2025, 1, 11)) == 6


def test_predicates_on_local_instant():
    local_instant = to_local(local(2025, 1, 6, 12, 0), SAO_PAULO)

    assert is_working_day(local_instant, {1})
    assert not is_working_day(local_instant, {0, 6})
    assert is_within_working_hours(local_instant, WorkingHours("12:00", "13:00"))


def test_from_settings_reads_row_attributes():
    row = SimpleNamespace(
        timezone="America/Noronha",
        working_days=[2, 3],
        working_hours={"start": "10:00", "end": "16:00"},
        show_holidays=False,
        holiday_region="recife",
    )

    config = BusinessHoursConfig.from_settings(row)

    assert config.working_days == frozenset({2, 3})
    assert config.working_hours == WorkingHours("10:00", "16:00")
    assert config.show_holidays is False
    assert config.holiday_region == "recife"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"working_hours": None},
        {"working_days": None},
        {"working_hours": {"start": "08:00"}},
        {"working_hours": {"start": "8:00", "end": "18:00"}},
        {"working_hours": {"start": "18:00", "end": "08:00"}},
        {"working_hours": {"start": "09:00", "end": "09:00"}},
        {"working_days": [1, 7]},
        {"working_days": 5},
        {"working_days": "12345"},
        {"timezone": "Invalid/Zone"},
        {"timezone": None},
    ],
)
def test_malformed_config_raises_configuration_error(kwargs):
    values = {
        "timezone": SAO_PAULO,
        "working_days": [1, 2, 3],
        "working_hours": {"start": "08:00", "end": "18:00"},
    }
    values.update(kwargs)

    with pytest.raises(ConfigurationError):
        BusinessHoursConfig.build(**values)


def test_rejection_is_a_result_not_an_exception(weekday_config):
    result = validate_appointment_time(local(2025, 1, 5, 3, 0), weekday_config)

    assert isinstance(result, ValidationResult)
    assert result.to_dict() == {"valid": False, "message": "Domingo não é um dia de funcionamento"}
