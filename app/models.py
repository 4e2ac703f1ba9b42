import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from .database import Base


def utcnow():
    """Naive UTC now, the storage format for every timestamp column"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_id():
    """Generate a UUID string primary key"""
    return str(uuid.uuid4())


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    cpf = Column(String(11), unique=True, index=True, nullable=False)  # digits only
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=False)
    notes = Column(Text, nullable=True)
    points = Column(Integer, default=0, nullable=False)  # Loyalty points balance
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    appointments = relationship(
        "Appointment", back_populates="client", cascade="all, delete-orphan"
    )
    loyalty_entries = relationship(
        "LoyaltyEntry", back_populates="client", cascade="all, delete-orphan"
    )


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    duration = Column(Integer, nullable=False)  # Minutes
    price = Column(Float, nullable=False)
    points = Column(Integer, default=0, nullable=False)  # Loyalty points awarded on completion
    image_url = Column(String(500), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    appointments = relationship("Appointment", back_populates="service")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    service_id = Column(String(36), ForeignKey("services.id"), nullable=False, index=True)
    date = Column(DateTime, nullable=False, index=True)  # Naive UTC
    status = Column(
        String(20), default="scheduled", nullable=False
    )  # scheduled, confirmed, completed, cancelled, no_show
    payment_method = Column(String(20), nullable=True)  # cash, pix, card, credit
    payment_status = Column(String(20), nullable=True)  # pending, paid
    notes = Column(Text, nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    points_awarded = Column(Boolean, default=False, nullable=False)  # Loyalty credited once
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    client = relationship("Client", back_populates="appointments")
    service = relationship("Service", back_populates="appointments")
    extra_services = relationship(
        "AppointmentService", back_populates="appointment", cascade="all, delete-orphan"
    )


class AppointmentService(Base):
    __tablename__ = "appointment_services"

    id = Column(String(36), primary_key=True, default=generate_id)
    appointment_id = Column(
        String(36), ForeignKey("appointments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_id = Column(String(36), ForeignKey("services.id"), nullable=False)
    price = Column(Float, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    appointment = relationship("Appointment", back_populates="extra_services")
    service = relationship("Service")


class GalleryImage(Base):
    __tablename__ = "gallery_images"

    id = Column(String(36), primary_key=True, default=generate_id)
    url = Column(String(500), nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=generate_id)
    type = Column(String(20), nullable=False)  # income, expense
    amount = Column(Float, nullable=False)
    description = Column(String(500), nullable=False)
    category = Column(String(100), nullable=True)
    payment_method = Column(String(20), nullable=True)
    appointment_id = Column(String(36), ForeignKey("appointments.id"), nullable=True)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)


class LoyaltyEntry(Base):
    __tablename__ = "loyalty_entries"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(
        String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    points = Column(Integer, nullable=False)  # Positive = earned, negative = redeemed
    description = Column(String(255), nullable=False)
    appointment_id = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    client = relationship("Client", back_populates="loyalty_entries")


class SystemSettings(Base):
    __tablename__ = "system_settings"

    id = Column(String(36), primary_key=True, default=generate_id)
    timezone = Column(String(64), nullable=False)  # IANA zone id
    show_holidays = Column(Boolean, default=True, nullable=False)
    holiday_region = Column(String(50), nullable=True)
    working_days = Column(JSON, nullable=True)  # e.g., [1, 2, 3, 4, 5, 6] (Sunday=0)
    working_hours = Column(JSON, nullable=True)  # e.g., {"start": "08:00", "end": "18:00"}
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class ThemeSettings(Base):
    __tablename__ = "theme_settings"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(100), nullable=False)
    primary_color = Column(String(7), nullable=False)  # #RRGGBB
    secondary_color = Column(String(7), nullable=False)
    accent_color = Column(String(7), nullable=False)
    background_color = Column(String(7), nullable=False)
    text_color = Column(String(7), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
