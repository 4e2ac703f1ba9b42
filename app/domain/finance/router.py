"""Finance router"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from ..scheduling import BusinessHoursConfig
from ..settings.dependencies import get_business_hours_config
from .schemas import TransactionCreate, TransactionResponse, TransactionSummary
from .service import FinanceService

router = APIRouter(prefix="/api/transactions", tags=["Finance"])


def get_finance_service(db: Session = Depends(get_db)) -> FinanceService:
    """Dependency injection for FinanceService"""
    return FinanceService(db)


# ============================================================================
# Transactions
# ============================================================================


@router.get("", response_model=list[TransactionResponse])
async def get_transactions(
    type: Optional[Literal["income", "expense"]] = Query(None),
    start: Optional[str] = Query(None, description="First local day, YYYY-MM-DD"),
    end: Optional[str] = Query(None, description="Last local day, YYYY-MM-DD"),
    config: BusinessHoursConfig = Depends(get_business_hours_config),
    service: FinanceService = Depends(get_finance_service),
):
    transactions = service.get_transactions(config, type=type, start=start, end=end)
    return [TransactionResponse.from_model(t) for t in transactions]


@router.get("/summary", response_model=TransactionSummary)
async def get_transaction_summary(
    start: Optional[str] = Query(None),
    end: Optional[str] = Query(None),
    config: BusinessHoursConfig = Depends(get_business_hours_config),
    service: FinanceService = Depends(get_finance_service),
):
    return service.get_summary(config, start=start, end=end)


@router.post("", response_model=TransactionResponse, status_code=201)
async def create_transaction(
    data: TransactionCreate, service: FinanceService = Depends(get_finance_service)
):
    return TransactionResponse.from_model(service.create_transaction(data))
