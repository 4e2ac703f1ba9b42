"""Appointment domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from ...shared.schemas import UTCResponse
from ..catalog.schemas import ServiceResponse
from ..clients.schemas import ClientResponse

AppointmentStatus = Literal["scheduled", "confirmed", "completed", "cancelled", "no_show"]
PaymentMethod = Literal["cash", "pix", "card", "credit"]
PaymentStatus = Literal["pending", "paid"]


def _validate_price(v):
    if v is not None and v < 0:
        raise ValueError("Preço não pode ser negativo")
    return round(v, 2) if v is not None else v


class AppointmentCreate(BaseModel):
    """Booking request; ``date`` is the start instant (naive values are taken as UTC)"""

    clientId: str
    serviceId: str
    date: datetime
    status: AppointmentStatus = "scheduled"
    paymentMethod: Optional[PaymentMethod] = None
    paymentStatus: Optional[PaymentStatus] = None
    notes: Optional[str] = None
    price: Optional[float] = None

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _validate_price(v)


class AppointmentUpdate(BaseModel):
    """Partial update; a new ``date`` reschedules the appointment"""

    serviceId: Optional[str] = None
    date: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    paymentMethod: Optional[PaymentMethod] = None
    paymentStatus: Optional[PaymentStatus] = None
    notes: Optional[str] = None
    price: Optional[float] = None

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _validate_price(v)


class AppointmentResponse(UTCResponse):
    id: str
    clientId: str
    serviceId: str
    date: datetime
    status: str
    paymentMethod: Optional[str] = None
    paymentStatus: Optional[str] = None
    notes: Optional[str] = None
    price: float
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    client: Optional[ClientResponse] = None
    service: Optional[ServiceResponse] = None

    @classmethod
    def from_model(cls, appointment, with_details: bool = True) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            clientId=appointment.client_id,
            serviceId=appointment.service_id,
            date=appointment.date,
            status=appointment.status,
            paymentMethod=appointment.payment_method,
            paymentStatus=appointment.payment_status,
            notes=appointment.notes,
            price=appointment.price,
            createdAt=appointment.created_at,
            updatedAt=appointment.updated_at,
            client=(
                ClientResponse.from_model(appointment.client)
                if with_details and appointment.client
                else None
            ),
            service=(
                ServiceResponse.from_model(appointment.service)
                if with_details and appointment.service
                else None
            ),
        )


class TimeValidationRequest(BaseModel):
    date: datetime


class TimeValidationResponse(BaseModel):
    valid: bool
    message: Optional[str] = None


class AppointmentServiceCreate(BaseModel):
    serviceId: str
    price: Optional[float] = None

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _validate_price(v)


class AppointmentServiceUpdate(BaseModel):
    price: float

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _validate_price(v)


class AppointmentServiceResponse(UTCResponse):
    id: str
    appointmentId: str
    serviceId: str
    price: float
    createdAt: Optional[datetime] = None
    service: Optional[ServiceResponse] = None

    @classmethod
    def from_model(cls, item) -> "AppointmentServiceResponse":
        return cls(
            id=item.id,
            appointmentId=item.appointment_id,
            serviceId=item.service_id,
            price=item.price,
            createdAt=item.created_at,
            service=ServiceResponse.from_model(item.service) if item.service else None,
        )
