"""Settings router - system settings, theme and calendar endpoints"""

import logging

from fastapi import APIRouter, Depends, Query

from .dependencies import get_settings_service
from .schemas import (
    HolidayResponse,
    SettingsOptionsResponse,
    SystemSettingsResponse,
    SystemSettingsUpdate,
    ThemeBase,
    ThemeResponse,
    ThemeUpdate,
)
from .service import SettingsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Settings"])


# ============================================================================
# SYSTEM SETTINGS
# ============================================================================


@router.get("/system-settings", response_model=SystemSettingsResponse)
async def get_system_settings(service: SettingsService = Depends(get_settings_service)):
    """Get the salon's system settings (created with defaults on first access)"""
    return SystemSettingsResponse.from_model(service.get_settings())


@router.put("/system-settings", response_model=SystemSettingsResponse)
async def update_system_settings(
    data: SystemSettingsUpdate,
    service: SettingsService = Depends(get_settings_service),
):
    """Update timezone, working days/hours and holiday display"""
    return SystemSettingsResponse.from_model(service.update_settings(data))


@router.get("/system-settings/options", response_model=SettingsOptionsResponse)
async def get_settings_options(service: SettingsService = Depends(get_settings_service)):
    """Supported timezones and holiday regions"""
    return service.get_options()


@router.get("/calendar/holidays", response_model=list[HolidayResponse])
async def get_calendar_holidays(
    year: int = Query(..., ge=1900, le=2200),
    month: int = Query(..., ge=1, le=12),
    service: SettingsService = Depends(get_settings_service),
):
    """National holidays of a month, empty when holiday display is off"""
    return service.get_holidays(year, month)


# ============================================================================
# THEME
# ============================================================================


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(service: SettingsService = Depends(get_settings_service)):
    return ThemeResponse.from_model(service.get_theme())


@router.put("/theme", response_model=ThemeResponse)
async def update_theme(
    data: ThemeUpdate,
    service: SettingsService = Depends(get_settings_service),
):
    return ThemeResponse.from_model(service.update_theme(data))


@router.get("/theme/presets", response_model=list[ThemeBase])
async def get_theme_presets():
    return SettingsService.get_theme_presets()
