"""Service catalog business logic"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment, AppointmentService, Service
from .repository import ServiceRepository
from .schemas import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


class CatalogService:
    """Service layer for the salon's service catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceRepository()

    def get_services(self, active_only: bool = False) -> list[Service]:
        return self.repo.get_services(self.db, active_only)

    def get_service(self, service_id: str) -> Service:
        service = self.repo.get_service_by_id(self.db, service_id)
        if not service:
            raise HTTPException(status_code=404, detail="Service not found")
        return service

    def create_service(self, data: ServiceCreate) -> Service:
        service = self.repo.create_service(
            self.db,
            name=data.name,
            description=data.description,
            duration=data.duration,
            price=data.price,
            points=data.points,
            image_url=data.imageUrl,
            active=data.active,
        )
        logger.info(f"💇 Created service {service.id} ({service.name})")
        return service

    def update_service(self, service_id: str, data: ServiceUpdate) -> Service:
        service = self.get_service(service_id)

        updates = {
            "name": data.name,
            "description": data.description,
            "duration": data.duration,
            "price": data.price,
            "points": data.points,
            "image_url": data.imageUrl,
            "active": data.active,
        }
        return self.repo.update_service(self.db, service, **updates)

    def delete_service(self, service_id: str) -> None:
        """Delete a service that was never booked; booked services must be deactivated"""
        service = self.get_service(service_id)

        in_use = (
            self.db.query(Appointment.id).filter(Appointment.service_id == service.id).first()
            or self.db.query(AppointmentService.id)
            .filter(AppointmentService.service_id == service.id)
            .first()
        )
        if in_use:
            raise HTTPException(
                status_code=409,
                detail="Serviço possui agendamentos; desative-o em vez de excluir",
            )

        self.repo.delete_service(self.db, service)
        logger.info(f"🗑️ Deleted service {service_id}")
