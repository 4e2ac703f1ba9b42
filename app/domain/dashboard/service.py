"""Dashboard service - today's numbers and the recent activity feed"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ... import config
from ...models import utcnow
from ..appointments.repository import AppointmentRepository
from ..clients.repository import ClientRepository
from ..gallery.service import GalleryService
from ..scheduling import BusinessHoursConfig, local_day_bounds, minutes_between, to_naive_utc
from .schemas import ActivityResponse, TodayStatsResponse

logger = logging.getLogger(__name__)

RECENT_APPOINTMENTS = 5
RECENT_CLIENTS = 3
RECENT_IMAGES = 2
MAX_ACTIVITIES = 6

# status -> (action, icon, icon background)
APPOINTMENT_ACTIVITY = {
    "completed": ("concluído", "Check", "bg-green-100"),
    "no_show": ("faltou", "X", "bg-red-100"),
    "confirmed": ("confirmado", "Check", "bg-green-100"),
}
DEFAULT_APPOINTMENT_ACTIVITY = ("criado", "Calendar", "bg-blue-100")


def daily_slots(business_hours: BusinessHoursConfig) -> int:
    """Average-length appointments that fit in the configured working window"""
    hours = business_hours.working_hours
    return minutes_between(hours.start, hours.end) // config.AVERAGE_APPOINTMENT_MINUTES


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.appointments = AppointmentRepository()
        self.clients = ClientRepository()

    def get_today_stats(
        self, business_hours: BusinessHoursConfig, now: Optional[datetime] = None
    ) -> TodayStatsResponse:
        """
        Numbers for the admin home screen.

        "Today" is the salon's local calendar day; new clients are those
        registered in the last 7 days.
        """
        now = now or utcnow()
        bounds = local_day_bounds(now, business_hours.timezone)
        todays = self.appointments.get_appointments_between(
            self.db, to_naive_utc(bounds.start), to_naive_utc(bounds.end)
        )

        revenue = sum(a.price or 0.0 for a in todays if a.status == "completed")
        new_clients = self.clients.count_created_since(self.db, to_naive_utc(now) - timedelta(days=7))

        slots = daily_slots(business_hours)
        occupancy = round(len(todays) / slots * 100) if slots else 0

        return TodayStatsResponse(
            todayAppointments=len(todays),
            todayRevenue=round(revenue, 2),
            newClients=new_clients,
            occupancyRate=min(occupancy, 100),
        )

    def get_recent_activities(self) -> list[ActivityResponse]:
        activities = []

        for appointment in self.appointments.get_recently_updated(self.db, RECENT_APPOINTMENTS):
            action, icon, icon_bg = APPOINTMENT_ACTIVITY.get(appointment.status, DEFAULT_APPOINTMENT_ACTIVITY)
            client_name = appointment.client.name if appointment.client else "-"
            service_name = appointment.service.name if appointment.service else "-"
            activities.append(
                ActivityResponse(
                    id=appointment.id,
                    type="appointment",
                    action=action,
                    description=f"Agendamento {action}: {client_name} - {service_name}",
                    timestamp=appointment.updated_at or appointment.created_at,
                    icon=icon,
                    iconBg=icon_bg,
                )
            )

        for client in self.clients.get_recent_clients(self.db, RECENT_CLIENTS):
            activities.append(
                ActivityResponse(
                    id=client.id,
                    type="client",
                    action="cadastrado",
                    description=f"Nova cliente cadastrada: {client.name}",
                    timestamp=client.created_at,
                    icon="UserPlus",
                    iconBg="bg-blue-100",
                )
            )

        for image in GalleryService(self.db).get_recent_images(RECENT_IMAGES):
            activities.append(
                ActivityResponse(
                    id=image.id,
                    type="gallery",
                    action="adicionada",
                    description=f"Foto adicionada à galeria: {image.title or 'Sem título'}",
                    timestamp=image.created_at,
                    icon="Camera",
                    iconBg="bg-purple-100",
                )
            )

        activities.sort(key=lambda a: a.timestamp, reverse=True)
        return activities[:MAX_ACTIVITIES]
