"""Appointment router - booking, rescheduling and cancellation endpoints"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ...config import BOOKING_RATE_LIMIT
from ...database import get_db
from ...rate_limiter import create_rate_limiter
from ..scheduling import BusinessHoursConfig
from ..settings.dependencies import get_business_hours_config, get_settings_service
from ..settings.service import SettingsService
from .schemas import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentServiceCreate,
    AppointmentServiceResponse,
    AppointmentServiceUpdate,
    AppointmentUpdate,
    TimeValidationRequest,
    TimeValidationResponse,
)
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Appointments"])

booking_rate_limit = create_rate_limiter(
    limit=BOOKING_RATE_LIMIT, window_seconds=60, key_prefix="booking"
)


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


# ============================================================================
# APPOINTMENTS
# ============================================================================


@router.get("/appointments", response_model=list[AppointmentResponse])
async def get_appointments(
    date: Optional[str] = Query(None, description="Local calendar day (YYYY-MM-DD) or ISO instant"),
    clientId: Optional[str] = Query(None),
    service: BookingService = Depends(get_booking_service),
    settings: SettingsService = Depends(get_settings_service),
):
    """List appointments with client and service details; filters combine"""
    # Settings are only needed to resolve the local day
    config = settings.get_business_hours_config() if date else None
    appointments = service.get_appointments(day=date, client_id=clientId, config=config)
    return [AppointmentResponse.from_model(a) for a in appointments]


@router.post("/appointments/validate-time", response_model=TimeValidationResponse)
async def validate_appointment_time(
    data: TimeValidationRequest,
    config: BusinessHoursConfig = Depends(get_business_hours_config),
):
    """Check a candidate start time against the business hours without booking"""
    return BookingService.check_time(data.date, config).to_dict()


@router.get("/appointments/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str, service: BookingService = Depends(get_booking_service)
):
    return AppointmentResponse.from_model(service.get_appointment(appointment_id))


@router.post("/appointments", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    service: BookingService = Depends(get_booking_service),
    config: BusinessHoursConfig = Depends(get_business_hours_config),
    _: None = Depends(booking_rate_limit),
):
    """Book an appointment; rejected with 400 outside working days/hours"""
    return AppointmentResponse.from_model(service.create_appointment(data, config))


@router.put("/appointments/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    service: BookingService = Depends(get_booking_service),
    config: BusinessHoursConfig = Depends(get_business_hours_config),
):
    """Update or reschedule an appointment"""
    return AppointmentResponse.from_model(service.update_appointment(appointment_id, data, config))


@router.post("/appointments/{appointment_id}/cancel", response_model=AppointmentResponse)
async def cancel_appointment(
    appointment_id: str, service: BookingService = Depends(get_booking_service)
):
    return AppointmentResponse.from_model(service.cancel_appointment(appointment_id))


@router.delete("/appointments/{appointment_id}", status_code=204)
async def delete_appointment(
    appointment_id: str, service: BookingService = Depends(get_booking_service)
):
    service.delete_appointment(appointment_id)
    return Response(status_code=204)


# ============================================================================
# EXTRA SERVICES PER APPOINTMENT
# ============================================================================


@router.get(
    "/appointments/{appointment_id}/services", response_model=list[AppointmentServiceResponse]
)
async def get_appointment_services(
    appointment_id: str, service: BookingService = Depends(get_booking_service)
):
    return [AppointmentServiceResponse.from_model(i) for i in service.get_extra_services(appointment_id)]


@router.post(
    "/appointments/{appointment_id}/services",
    response_model=AppointmentServiceResponse,
    status_code=201,
)
async def add_appointment_service(
    appointment_id: str,
    data: AppointmentServiceCreate,
    service: BookingService = Depends(get_booking_service),
):
    return AppointmentServiceResponse.from_model(service.add_extra_service(appointment_id, data))


@router.patch("/appointment-services/{item_id}", response_model=AppointmentServiceResponse)
async def update_appointment_service(
    item_id: str,
    data: AppointmentServiceUpdate,
    service: BookingService = Depends(get_booking_service),
):
    return AppointmentServiceResponse.from_model(service.update_extra_service(item_id, data.price))


@router.delete("/appointment-services/{item_id}", status_code=204)
async def remove_appointment_service(
    item_id: str, service: BookingService = Depends(get_booking_service)
):
    service.remove_extra_service(item_id)
    return Response(status_code=204)
