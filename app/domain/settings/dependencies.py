"""Dependency providers for settings, shared by the other domain routers"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ..scheduling import BusinessHoursConfig
from .service import SettingsService


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    """Dependency injection for SettingsService"""
    return SettingsService(db)


def get_business_hours_config(
    service: SettingsService = Depends(get_settings_service),
) -> BusinessHoursConfig:
    """The one accessor that turns persisted settings into a validator config"""
    return service.get_business_hours_config()
