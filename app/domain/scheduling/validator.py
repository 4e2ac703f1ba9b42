"""
Appointment time validation against the salon's business hours.

``validate_appointment_time`` is a pure function of its arguments: it converts
the proposed instant to local time, then checks the working day and the
working-hours window. A rejected booking is returned as a negative
``ValidationResult``; a broken configuration raises ``ConfigurationError``
while the config is being built, before any booking decision is made.

Holidays are informational only (shown on the calendar); they never reject a
booking here.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from .exceptions import ConfigurationError
from .timezone import get_zone, hhmm, to_local

# Index matches the Sunday=0 weekday numbering used by the settings
WEEKDAY_NAMES = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")

HHMM_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

HOLIDAY_REGIONS = {
    "sao_paulo": "São Paulo",
    "rio_de_janeiro": "Rio de Janeiro",
    "belo_horizonte": "Belo Horizonte",
    "brasilia": "Brasília",
    "salvador": "Salvador",
    "recife": "Recife",
    "fortaleza": "Fortaleza",
    "porto_alegre": "Porto Alegre",
    "curitiba": "Curitiba",
    "manaus": "Manaus",
}

# Fixed-offset zones only (no daylight saving)
SUPPORTED_TIMEZONES = {
    "America/Sao_Paulo": "São Paulo (UTC-3)",
    "America/Manaus": "Manaus (UTC-4)",
    "America/Rio_Branco": "Rio Branco (UTC-5)",
    "America/Noronha": "Fernando de Noronha (UTC-2)",
}


def weekday_index(local_instant: datetime) -> int:
    """Weekday with Sunday=0 ... Saturday=6"""
    return (local_instant.weekday() + 1) % 7


def is_valid_hhmm(value: Any) -> bool:
    return isinstance(value, str) and bool(HHMM_PATTERN.match(value))


@dataclass(frozen=True)
class WorkingHours:
    start: str
    end: str

    def __post_init__(self):
        if not is_valid_hhmm(self.start) or not is_valid_hhmm(self.end):
            raise ConfigurationError(
                f"Horário de funcionamento inválido: {self.start!r} - {self.end!r}"
            )
        # Zero-padded "HH:MM" strings order the same way as the times they encode
        if self.start >= self.end:
            raise ConfigurationError(
                f"Início do expediente ({self.start}) deve ser anterior ao fim ({self.end})"
            )

    @property
    def window(self) -> str:
        return f"{self.start} às {self.end}"


@dataclass(frozen=True)
class BusinessHoursConfig:
    """Business-hours settings needed to decide whether an instant is bookable"""

    timezone: str
    working_days: frozenset
    working_hours: WorkingHours
    show_holidays: bool = True
    holiday_region: Optional[str] = None

    def __post_init__(self):
        get_zone(self.timezone)
        invalid_days = [d for d in self.working_days if not isinstance(d, int) or not 0 <= d <= 6]
        if invalid_days:
            raise ConfigurationError(f"Dias de funcionamento inválidos: {invalid_days}")

    @classmethod
    def build(
        cls,
        timezone: Optional[str],
        working_days: Optional[Iterable[int]],
        working_hours: Optional[Mapping[str, str]],
        show_holidays: Optional[bool] = True,
        holiday_region: Optional[str] = None,
    ) -> "BusinessHoursConfig":
        """Build a config from raw settings values, raising ConfigurationError when malformed"""
        if working_hours is None:
            raise ConfigurationError("Horário de funcionamento não configurado")
        if working_days is None:
            raise ConfigurationError("Dias de funcionamento não configurados")
        if isinstance(working_days, (str, bytes, Mapping)) or not isinstance(working_days, Iterable):
            raise ConfigurationError(f"Dias de funcionamento devem ser uma lista: {working_days!r}")
        if not isinstance(working_hours, Mapping) or "start" not in working_hours or "end" not in working_hours:
            raise ConfigurationError("Horário de funcionamento deve conter 'start' e 'end'")

        return cls(
            timezone=timezone,
            working_days=frozenset(working_days),
            working_hours=WorkingHours(start=working_hours["start"], end=working_hours["end"]),
            show_holidays=bool(show_holidays),
            holiday_region=holiday_region,
        )

    @classmethod
    def from_settings(cls, settings: Any) -> "BusinessHoursConfig":
        """Build a config from a SystemSettings row (or any object with the same attributes)"""
        return cls.build(
            timezone=getattr(settings, "timezone", None),
            working_days=getattr(settings, "working_days", None),
            working_hours=getattr(settings, "working_hours", None),
            show_holidays=getattr(settings, "show_holidays", True),
            holiday_region=getattr(settings, "holiday_region", None),
        )


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: Optional[str] = field(default=None)

    def to_dict(self) -> dict:
        if self.message is None:
            return {"valid": self.valid}
        return {"valid": self.valid, "message": self.message}


def is_working_day(local_instant: datetime, working_days: Iterable[int]) -> bool:
    return weekday_index(local_instant) in set(working_days)


def is_within_working_hours(local_instant: datetime, working_hours: WorkingHours) -> bool:
    """Both ends of the window are bookable"""
    time_str = hhmm(local_instant)
    return working_hours.start <= time_str <= working_hours.end


def validate_appointment_time(instant: datetime, config: BusinessHoursConfig) -> ValidationResult:
    """Decide whether an appointment may start at ``instant`` (naive values are UTC)"""
    local_instant = to_local(instant, config.timezone)

    if not is_working_day(local_instant, config.working_days):
        day_name = WEEKDAY_NAMES[weekday_index(local_instant)]
        return ValidationResult(valid=False, message=f"{day_name} não é um dia de funcionamento")

    if not is_within_working_hours(local_instant, config.working_hours):
        return ValidationResult(
            valid=False,
            message=f"Horário fora do funcionamento ({config.working_hours.window})",
        )

    return ValidationResult(valid=True)
