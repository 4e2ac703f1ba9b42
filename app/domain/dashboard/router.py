"""Dashboard router"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ..scheduling import BusinessHoursConfig
from ..settings.dependencies import get_business_hours_config
from .schemas import ActivityResponse, TodayStatsResponse
from .service import DashboardService

router = APIRouter(prefix="/api", tags=["Dashboard"])


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    """Dependency injection for DashboardService"""
    return DashboardService(db)


@router.get("/stats/today", response_model=TodayStatsResponse)
async def get_today_stats(
    business_hours: BusinessHoursConfig = Depends(get_business_hours_config),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.get_today_stats(business_hours)


@router.get("/activities/recent", response_model=list[ActivityResponse])
async def get_recent_activities(service: DashboardService = Depends(get_dashboard_service)):
    return service.get_recent_activities()
