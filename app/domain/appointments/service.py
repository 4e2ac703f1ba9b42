"""Appointment service - booking, rescheduling, cancellation and listings"""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment, AppointmentService, Client, Service, Transaction
from ..loyalty.service import LoyaltyService
from ..scheduling import (
    BusinessHoursConfig,
    DayBounds,
    ValidationResult,
    date_bounds,
    local_day_bounds,
    to_naive_utc,
    validate_appointment_time,
)
from .repository import AppointmentRepository
from .schemas import (
    AppointmentCreate,
    AppointmentServiceCreate,
    AppointmentUpdate,
)

logger = logging.getLogger(__name__)


def parse_day_filter(value: str, tz_name: str) -> DayBounds:
    """
    UTC bounds for the ``date`` query filter.

    A plain "YYYY-MM-DD" is a local calendar date; a full ISO datetime selects
    the local day that instant falls on.
    """
    try:
        if len(value) == 10:
            return date_bounds(date.fromisoformat(value), tz_name)
        return local_day_bounds(datetime.fromisoformat(value.replace("Z", "+00:00")), tz_name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Data inválida: {value}") from e


def reject_if_invalid(result: ValidationResult) -> None:
    if not result.valid:
        raise HTTPException(
            status_code=400,
            detail={"message": "Horário inválido", "error": result.message},
        )


class BookingService:
    """Service layer for appointments"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()
        self.loyalty = LoyaltyService(db)

    def get_appointments(
        self,
        day: Optional[str] = None,
        client_id: Optional[str] = None,
        config: Optional[BusinessHoursConfig] = None,
    ) -> list[Appointment]:
        """
        List appointments, optionally for one local day and/or one client.

        ``config`` is only needed (and only read) for the day filter.
        """
        if day:
            bounds = parse_day_filter(day, config.timezone)
            return self.repo.get_appointments_between(
                self.db, to_naive_utc(bounds.start), to_naive_utc(bounds.end), client_id=client_id
            )
        if client_id:
            return self.repo.get_appointments_by_client(self.db, client_id)
        return self.repo.get_appointments(self.db)

    def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = self.repo.get_appointment_by_id(self.db, appointment_id)
        if not appointment:
            raise HTTPException(status_code=404, detail="Appointment not found")
        return appointment

    def _get_service(self, service_id: str) -> Service:
        service = self.db.query(Service).filter(Service.id == service_id).first()
        if not service:
            raise HTTPException(status_code=404, detail="Service not found")
        return service

    @staticmethod
    def check_time(instant: datetime, config: BusinessHoursConfig) -> ValidationResult:
        return validate_appointment_time(instant, config)

    def create_appointment(self, data: AppointmentCreate, config: BusinessHoursConfig) -> Appointment:
        client = self.db.query(Client).filter(Client.id == data.clientId).first()
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        service = self._get_service(data.serviceId)

        result = self.check_time(data.date, config)
        if not result.valid:
            logger.info(f"📅 Booking rejected for client {client.id}: {result.message}")
        reject_if_invalid(result)

        appointment = self.repo.create_appointment(
            self.db,
            client_id=client.id,
            service_id=service.id,
            date=to_naive_utc(data.date),
            status=data.status,
            payment_method=data.paymentMethod,
            payment_status=data.paymentStatus,
            notes=data.notes,
            price=data.price if data.price is not None else service.price,
        )
        logger.info(f"📅 Created appointment {appointment.id} for client {client.id}")

        if appointment.status == "completed":
            self._complete(appointment)
        return self.get_appointment(appointment.id)

    def update_appointment(
        self, appointment_id: str, data: AppointmentUpdate, config: BusinessHoursConfig
    ) -> Appointment:
        appointment = self.get_appointment(appointment_id)

        updates = {}
        if data.date is not None:
            new_date = to_naive_utc(data.date)
            if new_date != appointment.date:
                reject_if_invalid(self.check_time(data.date, config))
                logger.info(f"📅 Rescheduling appointment {appointment.id} to {new_date} UTC")
            updates["date"] = new_date
        if data.serviceId is not None:
            updates["service_id"] = self._get_service(data.serviceId).id
        if data.status is not None:
            updates["status"] = data.status
        if data.paymentMethod is not None:
            updates["payment_method"] = data.paymentMethod
        if data.paymentStatus is not None:
            updates["payment_status"] = data.paymentStatus
        if data.notes is not None:
            updates["notes"] = data.notes
        if data.price is not None:
            updates["price"] = data.price

        appointment = self.repo.update_appointment(self.db, appointment, **updates)

        if appointment.status == "completed":
            self._complete(appointment)
        return self.get_appointment(appointment.id)

    def _complete(self, appointment: Appointment) -> None:
        if appointment.points_awarded:
            return
        self.loyalty.award_for_appointment(appointment)
        self.db.commit()

    def cancel_appointment(self, appointment_id: str) -> Appointment:
        appointment = self.get_appointment(appointment_id)
        if appointment.status == "completed":
            raise HTTPException(status_code=400, detail="Agendamento já concluído")
        if appointment.status != "cancelled":
            appointment = self.repo.update_appointment(self.db, appointment, status="cancelled")
            logger.info(f"🚫 Cancelled appointment {appointment_id}")
        return appointment

    def delete_appointment(self, appointment_id: str) -> None:
        appointment = self.get_appointment(appointment_id)
        self.db.query(Transaction).filter(Transaction.appointment_id == appointment.id).update(
            {Transaction.appointment_id: None}, synchronize_session=False
        )
        self.repo.delete_appointment(self.db, appointment)
        logger.info(f"🗑️ Deleted appointment {appointment_id}")

    # Extra services

    def get_extra_services(self, appointment_id: str) -> list[AppointmentService]:
        self.get_appointment(appointment_id)
        return self.repo.get_extra_services(self.db, appointment_id)

    def add_extra_service(self, appointment_id: str, data: AppointmentServiceCreate) -> AppointmentService:
        appointment = self.get_appointment(appointment_id)
        service = self._get_service(data.serviceId)
        return self.repo.add_extra_service(
            self.db,
            appointment_id=appointment.id,
            service_id=service.id,
            price=data.price if data.price is not None else service.price,
        )

    def _get_extra_service(self, item_id: str) -> AppointmentService:
        item = self.repo.get_extra_service_by_id(self.db, item_id)
        if not item:
            raise HTTPException(status_code=404, detail="Appointment service not found")
        return item

    def update_extra_service(self, item_id: str, price: float) -> AppointmentService:
        return self.repo.update_extra_service(self.db, self._get_extra_service(item_id), price)

    def remove_extra_service(self, item_id: str) -> None:
        self.repo.remove_extra_service(self.db, self._get_extra_service(item_id))
