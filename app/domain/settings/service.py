"""Settings service - system settings, theme and the business-hours accessor"""

import logging
from calendar import monthrange
from datetime import date

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import (
    DEFAULT_HOLIDAY_REGION,
    DEFAULT_TIMEZONE,
    DEFAULT_WORKING_DAYS,
    DEFAULT_WORKING_HOURS,
)
from ...models import SystemSettings, ThemeSettings
from ..scheduling import (
    HOLIDAY_REGIONS,
    SUPPORTED_TIMEZONES,
    BusinessHoursConfig,
    holidays_between,
)
from .repository import SettingsRepository
from .schemas import SystemSettingsUpdate, ThemeUpdate

logger = logging.getLogger(__name__)

THEME_PRESETS = [
    {
        "name": "Rosa Clássico",
        "primaryColor": "#ec4899",
        "secondaryColor": "#f9a8d4",
        "accentColor": "#fce7f3",
        "backgroundColor": "#ffffff",
        "textColor": "#1f2937",
    },
    {
        "name": "Rosa Vibrante",
        "primaryColor": "#e91e63",
        "secondaryColor": "#f48fb1",
        "accentColor": "#fce4ec",
        "backgroundColor": "#ffffff",
        "textColor": "#212121",
    },
    {
        "name": "Magenta Luxo",
        "primaryColor": "#d946ef",
        "secondaryColor": "#e879f9",
        "accentColor": "#fae8ff",
        "backgroundColor": "#ffffff",
        "textColor": "#1e293b",
    },
    {
        "name": "Rosa Suave",
        "primaryColor": "#f472b6",
        "secondaryColor": "#fbcfe8",
        "accentColor": "#fdf2f8",
        "backgroundColor": "#ffffff",
        "textColor": "#374151",
    },
]


class SettingsService:
    """Service layer for system settings and theme"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SettingsRepository()

    def get_settings(self) -> SystemSettings:
        """Get the settings row, creating it with defaults on first access"""
        settings = self.repo.get_system_settings(self.db)
        if settings:
            return settings

        logger.info("⚙️ No system settings found, creating defaults")
        return self.repo.create_system_settings(
            self.db,
            timezone=DEFAULT_TIMEZONE,
            show_holidays=True,
            holiday_region=DEFAULT_HOLIDAY_REGION,
            working_days=list(DEFAULT_WORKING_DAYS),
            working_hours=dict(DEFAULT_WORKING_HOURS),
        )

    def update_settings(self, data: SystemSettingsUpdate) -> SystemSettings:
        settings = self.get_settings()

        updates = {}
        if data.timezone is not None:
            updates["timezone"] = data.timezone
        if data.showHolidays is not None:
            updates["show_holidays"] = data.showHolidays
        if data.holidayRegion is not None:
            updates["holiday_region"] = data.holidayRegion
        if data.workingDays is not None:
            updates["working_days"] = data.workingDays
        if data.workingHours is not None:
            updates["working_hours"] = data.workingHours.model_dump()

        logger.info(f"⚙️ Updating system settings: {sorted(updates)}")
        return self.repo.update_system_settings(self.db, settings, **updates)

    def get_business_hours_config(self) -> BusinessHoursConfig:
        """
        Current business hours as a validator config.

        Read from the database on every call; raises ConfigurationError when the
        stored row is malformed.
        """
        return BusinessHoursConfig.from_settings(self.get_settings())

    def get_options(self) -> dict:
        return {
            "timezones": [{"value": k, "label": v} for k, v in SUPPORTED_TIMEZONES.items()],
            "holidayRegions": [{"value": k, "label": v} for k, v in HOLIDAY_REGIONS.items()],
        }

    def get_holidays(self, year: int, month: int) -> list[dict]:
        """Holidays of a month for the calendar; empty when holidays are hidden"""
        if not 1 <= month <= 12:
            raise HTTPException(status_code=400, detail="Mês inválido")

        config = self.get_business_hours_config()
        if not config.show_holidays:
            return []

        last_day = monthrange(year, month)[1]
        return [
            {"date": day, "name": holiday.name}
            for day, holiday in holidays_between(date(year, month, 1), date(year, month, last_day))
        ]

    # Theme

    def get_theme(self) -> ThemeSettings:
        theme = self.repo.get_theme(self.db)
        if theme:
            return theme

        default = THEME_PRESETS[0]
        return self.repo.create_theme(
            self.db,
            name=default["name"],
            primary_color=default["primaryColor"],
            secondary_color=default["secondaryColor"],
            accent_color=default["accentColor"],
            background_color=default["backgroundColor"],
            text_color=default["textColor"],
        )

    def update_theme(self, data: ThemeUpdate) -> ThemeSettings:
        theme = self.get_theme()

        updates = {
            "name": data.name,
            "primary_color": data.primaryColor,
            "secondary_color": data.secondaryColor,
            "accent_color": data.accentColor,
            "background_color": data.backgroundColor,
            "text_color": data.textColor,
        }
        logger.info(f"🎨 Updating theme to {data.name or theme.name}")
        return self.repo.update_theme(self.db, theme, **updates)

    @staticmethod
    def get_theme_presets() -> list[dict]:
        return THEME_PRESETS
