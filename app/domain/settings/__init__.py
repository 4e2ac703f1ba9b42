"""Settings domain - system settings, theme and the business-hours accessor"""

from .dependencies import get_business_hours_config, get_settings_service
from .router import router
from .service import SettingsService

__all__ = ["router", "SettingsService", "get_business_hours_config", "get_settings_service"]
