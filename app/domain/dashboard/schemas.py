"""Dashboard schemas"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from ...shared.schemas import UTCResponse


class TodayStatsResponse(BaseModel):
    todayAppointments: int
    todayRevenue: float
    newClients: int
    occupancyRate: int


class ActivityResponse(UTCResponse):
    id: str
    type: Literal["appointment", "client", "gallery"]
    action: str
    description: str
    timestamp: datetime
    icon: str
    iconBg: str
