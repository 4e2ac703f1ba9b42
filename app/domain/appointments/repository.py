"""Appointment repository - Database operations for appointments"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Appointment, AppointmentService


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def _with_details(db: Session):
        return db.query(Appointment).options(
            joinedload(Appointment.client), joinedload(Appointment.service)
        )

    @classmethod
    def get_appointments(cls, db: Session) -> list[Appointment]:
        """All appointments with client and service, latest date first"""
        return cls._with_details(db).order_by(Appointment.date.desc()).all()

    @classmethod
    def get_appointments_between(
        cls, db: Session, start: datetime, end: datetime, client_id: Optional[str] = None
    ) -> list[Appointment]:
        """Appointments with ``start <= date <= end`` (naive UTC bounds), earliest first"""
        query = cls._with_details(db).filter(Appointment.date >= start, Appointment.date <= end)
        if client_id:
            query = query.filter(Appointment.client_id == client_id)
        return query.order_by(Appointment.date.asc()).all()

    @classmethod
    def get_appointments_by_client(cls, db: Session, client_id: str) -> list[Appointment]:
        return (
            cls._with_details(db)
            .filter(Appointment.client_id == client_id)
            .order_by(Appointment.date.desc())
            .all()
        )

    @classmethod
    def get_appointment_by_id(cls, db: Session, appointment_id: str) -> Optional[Appointment]:
        return cls._with_details(db).filter(Appointment.id == appointment_id).first()

    @classmethod
    def get_recently_updated(cls, db: Session, limit: int) -> list[Appointment]:
        return cls._with_details(db).order_by(Appointment.updated_at.desc()).limit(limit).all()

    @staticmethod
    def create_appointment(db: Session, **appointment_data) -> Appointment:
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def update_appointment(db: Session, appointment: Appointment, **updates) -> Appointment:
        for key, value in updates.items():
            if value is not None and hasattr(appointment, key):
                setattr(appointment, key, value)

        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def delete_appointment(db: Session, appointment: Appointment) -> None:
        db.delete(appointment)
        db.commit()

    # Extra services attached to an appointment

    @staticmethod
    def get_extra_services(db: Session, appointment_id: str) -> list[AppointmentService]:
        return (
            db.query(AppointmentService)
            .options(joinedload(AppointmentService.service))
            .filter(AppointmentService.appointment_id == appointment_id)
            .order_by(AppointmentService.created_at.asc())
            .all()
        )

    @staticmethod
    def get_extra_service_by_id(db: Session, item_id: str) -> Optional[AppointmentService]:
        return db.query(AppointmentService).filter(AppointmentService.id == item_id).first()

    @staticmethod
    def add_extra_service(db: Session, **item_data) -> AppointmentService:
        item = AppointmentService(**item_data)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def update_extra_service(db: Session, item: AppointmentService, price: float) -> AppointmentService:
        item.price = price
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def remove_extra_service(db: Session, item: AppointmentService) -> None:
        db.delete(item)
        db.commit()
