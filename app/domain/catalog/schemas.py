"""Service catalog schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.schemas import UTCResponse


class ServiceCreate(BaseModel):
    name: str
    description: Optional[str] = None
    duration: int  # Minutes
    price: float
    points: int = 0
    imageUrl: Optional[str] = None
    active: bool = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Nome do serviço é obrigatório")
        return v

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v):
        if v <= 0:
            raise ValueError("Duração deve ser maior que zero")
        return v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        if v < 0:
            raise ValueError("Preço não pode ser negativo")
        return round(v, 2)

    @field_validator("points")
    @classmethod
    def validate_points(cls, v):
        if v < 0:
            raise ValueError("Pontos não podem ser negativos")
        return v


class ServiceUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    price: Optional[float] = None
    points: Optional[int] = None
    imageUrl: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v):
        if v is not None and v <= 0:
            raise ValueError("Duração deve ser maior que zero")
        return v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        if v is not None and v < 0:
            raise ValueError("Preço não pode ser negativo")
        return round(v, 2) if v is not None else v

    @field_validator("points")
    @classmethod
    def validate_points(cls, v):
        if v is not None and v < 0:
            raise ValueError("Pontos não podem ser negativos")
        return v


class ServiceResponse(UTCResponse):
    id: str
    name: str
    description: Optional[str] = None
    duration: int
    price: float
    points: int
    imageUrl: Optional[str] = None
    active: bool
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, service) -> "ServiceResponse":
        return cls(
            id=service.id,
            name=service.name,
            description=service.description,
            duration=service.duration,
            price=service.price,
            points=service.points or 0,
            imageUrl=service.image_url,
            active=service.active,
            createdAt=service.created_at,
            updatedAt=service.updated_at,
        )
