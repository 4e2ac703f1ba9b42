"""Settings repository - Database operations for system settings and theme"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import SystemSettings, ThemeSettings


class SettingsRepository:
    """Repository for the singleton settings rows"""

    @staticmethod
    def get_system_settings(db: Session) -> Optional[SystemSettings]:
        return db.query(SystemSettings).order_by(SystemSettings.created_at.asc()).first()

    @staticmethod
    def create_system_settings(db: Session, **settings_data) -> SystemSettings:
        settings = SystemSettings(**settings_data)
        db.add(settings)
        db.commit()
        db.refresh(settings)
        return settings

    @staticmethod
    def update_system_settings(db: Session, settings: SystemSettings, **updates) -> SystemSettings:
        for key, value in updates.items():
            if value is not None and hasattr(settings, key):
                setattr(settings, key, value)

        db.commit()
        db.refresh(settings)
        return settings

    @staticmethod
    def get_theme(db: Session) -> Optional[ThemeSettings]:
        return db.query(ThemeSettings).order_by(ThemeSettings.created_at.asc()).first()

    @staticmethod
    def create_theme(db: Session, **theme_data) -> ThemeSettings:
        theme = ThemeSettings(**theme_data)
        db.add(theme)
        db.commit()
        db.refresh(theme)
        return theme

    @staticmethod
    def update_theme(db: Session, theme: ThemeSettings, **updates) -> ThemeSettings:
        for key, value in updates.items():
            if value is not None and hasattr(theme, key):
                setattr(theme, key, value)

        db.commit()
        db.refresh(theme)
        return theme
