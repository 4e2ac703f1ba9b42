"""Finance schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from ...shared.sanitization import sanitize_text
from ...shared.schemas import UTCResponse
from ..appointments.schemas import PaymentMethod

TransactionType = Literal["income", "expense"]


class TransactionCreate(BaseModel):
    type: TransactionType
    amount: float
    description: str
    category: Optional[str] = None
    paymentMethod: Optional[PaymentMethod] = None
    appointmentId: Optional[str] = None
    clientId: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        if v <= 0:
            raise ValueError("Valor deve ser maior que zero")
        return round(v, 2)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        v = sanitize_text(v, max_length=500)
        if not v:
            raise ValueError("Descrição é obrigatória")
        return v

    @field_validator("category")
    @classmethod
    def sanitize_category(cls, v):
        return sanitize_text(v, max_length=100)


class TransactionResponse(UTCResponse):
    id: str
    type: TransactionType
    amount: float
    description: str
    category: Optional[str] = None
    paymentMethod: Optional[str] = None
    appointmentId: Optional[str] = None
    clientId: Optional[str] = None
    createdAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            type=transaction.type,
            amount=transaction.amount,
            description=transaction.description,
            category=transaction.category,
            paymentMethod=transaction.payment_method,
            appointmentId=transaction.appointment_id,
            clientId=transaction.client_id,
            createdAt=transaction.created_at,
        )


class TransactionSummary(BaseModel):
    income: float
    expense: float
    balance: float
    count: int
