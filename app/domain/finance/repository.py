"""Transaction repository - Data access layer for the cash book"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Transaction


class TransactionRepository:
    """Repository for transaction data access"""

    @staticmethod
    def _between(query, start: Optional[datetime], end: Optional[datetime]):
        if start is not None:
            query = query.filter(Transaction.created_at >= start)
        if end is not None:
            query = query.filter(Transaction.created_at <= end)
        return query

    @staticmethod
    def get_transactions(
        db: Session,
        type: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Transaction]:
        query = TransactionRepository._between(db.query(Transaction), start, end)
        if type:
            query = query.filter(Transaction.type == type)
        return query.order_by(Transaction.created_at.desc()).all()

    @staticmethod
    def create_transaction(db: Session, **data) -> Transaction:
        transaction = Transaction(**data)
        db.add(transaction)
        db.commit()
        db.refresh(transaction)
        return transaction

    @staticmethod
    def totals_by_type(
        db: Session, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> dict[str, tuple[float, int]]:
        """Sum and count per transaction type"""
        query = db.query(
            Transaction.type, func.coalesce(func.sum(Transaction.amount), 0.0), func.count(Transaction.id)
        )
        rows = TransactionRepository._between(query, start, end).group_by(Transaction.type).all()
        return {row[0]: (float(row[1]), int(row[2])) for row in rows}
