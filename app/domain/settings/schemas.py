"""Settings domain schemas - system settings, theme and calendar holidays"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from ...shared.schemas import UTCResponse
from ...shared.validators import validate_hex_color
from ..scheduling import HOLIDAY_REGIONS, SUPPORTED_TIMEZONES, is_valid_hhmm


class WorkingHoursSchema(BaseModel):
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_hhmm(cls, v):
        if not is_valid_hhmm(v):
            raise ValueError("Horário deve estar no formato HH:MM")
        return v

    @model_validator(mode="after")
    def validate_order(self):
        if self.start >= self.end:
            raise ValueError("Início do expediente deve ser anterior ao fim")
        return self


class SystemSettingsResponse(UTCResponse):
    id: str
    timezone: str
    showHolidays: bool
    holidayRegion: Optional[str] = None
    workingDays: list[int]
    workingHours: dict
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, settings) -> "SystemSettingsResponse":
        return cls(
            id=settings.id,
            timezone=settings.timezone,
            showHolidays=settings.show_holidays,
            holidayRegion=settings.holiday_region,
            workingDays=settings.working_days or [],
            workingHours=settings.working_hours or {},
            createdAt=settings.created_at,
            updatedAt=settings.updated_at,
        )


class SystemSettingsUpdate(BaseModel):
    """Partial update; id and timestamps are not client-writable"""

    timezone: Optional[str] = None
    showHolidays: Optional[bool] = None
    holidayRegion: Optional[str] = None
    workingDays: Optional[list[int]] = None
    workingHours: Optional[WorkingHoursSchema] = None

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        if v is not None and v not in SUPPORTED_TIMEZONES:
            raise ValueError(f"Fuso horário não suportado: {v}")
        return v

    @field_validator("holidayRegion")
    @classmethod
    def validate_region(cls, v):
        if v is not None and v not in HOLIDAY_REGIONS:
            raise ValueError(f"Região de feriados não suportada: {v}")
        return v

    @field_validator("workingDays")
    @classmethod
    def validate_days(cls, v):
        if v is None:
            return v
        if any(day < 0 or day > 6 for day in v):
            raise ValueError("Dias de funcionamento devem estar entre 0 (Domingo) e 6 (Sábado)")
        return sorted(set(v))


class OptionItem(BaseModel):
    value: str
    label: str


class SettingsOptionsResponse(BaseModel):
    timezones: list[OptionItem]
    holidayRegions: list[OptionItem]


class ThemeBase(BaseModel):
    name: str
    primaryColor: str
    secondaryColor: str
    accentColor: str
    backgroundColor: str
    textColor: str


class ThemeResponse(UTCResponse, ThemeBase):
    id: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, theme) -> "ThemeResponse":
        return cls(
            id=theme.id,
            name=theme.name,
            primaryColor=theme.primary_color,
            secondaryColor=theme.secondary_color,
            accentColor=theme.accent_color,
            backgroundColor=theme.background_color,
            textColor=theme.text_color,
            createdAt=theme.created_at,
            updatedAt=theme.updated_at,
        )


class ThemeUpdate(BaseModel):
    name: Optional[str] = None
    primaryColor: Optional[str] = None
    secondaryColor: Optional[str] = None
    accentColor: Optional[str] = None
    backgroundColor: Optional[str] = None
    textColor: Optional[str] = None

    @field_validator(
        "primaryColor", "secondaryColor", "accentColor", "backgroundColor", "textColor"
    )
    @classmethod
    def validate_color(cls, v):
        return validate_hex_color(v)


class HolidayResponse(BaseModel):
    date: date
    name: str
