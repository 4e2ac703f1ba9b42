"""Client domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.schemas import UTCResponse
from ...shared.validators import validate_br_phone, validate_cpf, validate_email


class ClientCreate(BaseModel):
    """Schema for creating a new client"""

    name: str
    cpf: str
    email: Optional[str] = None
    phone: str
    notes: Optional[str] = None
    points: Optional[int] = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Nome é obrigatório")
        return v

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v):
        return validate_cpf(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return validate_email(v) if v else None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return validate_br_phone(v)

    @field_validator("points")
    @classmethod
    def validate_points(cls, v):
        if v is not None and v < 0:
            raise ValueError("Pontos não podem ser negativos")
        return v


class ClientUpdate(BaseModel):
    """Schema for updating an existing client"""

    name: Optional[str] = None
    cpf: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    points: Optional[int] = None

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v):
        return validate_cpf(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return validate_email(v) if v else v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return validate_br_phone(v) if v else v

    @field_validator("points")
    @classmethod
    def validate_points(cls, v):
        if v is not None and v < 0:
            raise ValueError("Pontos não podem ser negativos")
        return v


class ClientLogin(BaseModel):
    """Customer app login by CPF"""

    cpf: str


class ClientResponse(UTCResponse):
    """Schema for client response"""

    id: str
    name: str
    cpf: str
    email: Optional[str] = None
    phone: str
    notes: Optional[str] = None
    points: int
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, client) -> "ClientResponse":
        return cls(
            id=client.id,
            name=client.name,
            cpf=client.cpf,
            email=client.email,
            phone=client.phone,
            notes=client.notes,
            points=client.points or 0,
            createdAt=client.created_at,
            updatedAt=client.updated_at,
        )
