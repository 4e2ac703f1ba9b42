"""Finance service - income and expense bookkeeping"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment, Client, Transaction
from ..appointments.service import parse_day_filter
from ..scheduling import BusinessHoursConfig, to_naive_utc
from .repository import TransactionRepository
from .schemas import TransactionCreate, TransactionSummary

logger = logging.getLogger(__name__)


class FinanceService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TransactionRepository()

    def _range(self, config: BusinessHoursConfig, start: Optional[str], end: Optional[str]):
        """Local calendar days ``start``..``end`` (inclusive) as naive UTC bounds"""
        start_at = to_naive_utc(parse_day_filter(start, config.timezone).start) if start else None
        end_at = to_naive_utc(parse_day_filter(end, config.timezone).end) if end else None
        if start_at and end_at and start_at > end_at:
            raise HTTPException(status_code=400, detail="Período inválido")
        return start_at, end_at

    def get_transactions(
        self,
        config: BusinessHoursConfig,
        type: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> list[Transaction]:
        start_at, end_at = self._range(config, start, end)
        return self.repo.get_transactions(self.db, type=type, start=start_at, end=end_at)

    def create_transaction(self, data: TransactionCreate) -> Transaction:
        if data.clientId and not self.db.query(Client).filter(Client.id == data.clientId).first():
            raise HTTPException(status_code=404, detail="Client not found")
        if data.appointmentId and not (
            self.db.query(Appointment).filter(Appointment.id == data.appointmentId).first()
        ):
            raise HTTPException(status_code=404, detail="Appointment not found")

        transaction = self.repo.create_transaction(
            self.db,
            type=data.type,
            amount=data.amount,
            description=data.description,
            category=data.category,
            payment_method=data.paymentMethod,
            appointment_id=data.appointmentId,
            client_id=data.clientId,
        )
        logger.info(f"💰 Recorded {transaction.type} of {transaction.amount:.2f} ({transaction.id})")
        return transaction

    def get_summary(
        self, config: BusinessHoursConfig, start: Optional[str] = None, end: Optional[str] = None
    ) -> TransactionSummary:
        start_at, end_at = self._range(config, start, end)
        totals = self.repo.totals_by_type(self.db, start_at, end_at)
        income, income_count = totals.get("income", (0.0, 0))
        expense, expense_count = totals.get("expense", (0.0, 0))
        return TransactionSummary(
            income=round(income, 2),
            expense=round(expense, 2),
            balance=round(income - expense, 2),
            count=income_count + expense_count,
        )
