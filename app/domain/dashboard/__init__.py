"""Dashboard domain - admin home screen numbers and activity feed"""

from .router import router
from .service import DashboardService

__all__ = ["router", "DashboardService"]
