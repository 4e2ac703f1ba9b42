"""Loyalty router"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import (
    LoyaltyEntryResponse,
    LoyaltySummaryResponse,
    RedeemRequest,
    RedeemResponse,
    RewardResponse,
)
from .service import REWARDS, LoyaltyService

router = APIRouter(prefix="/api/loyalty", tags=["Loyalty"])


def get_loyalty_service(db: Session = Depends(get_db)) -> LoyaltyService:
    """Dependency injection for LoyaltyService"""
    return LoyaltyService(db)


@router.get("/rewards", response_model=list[RewardResponse])
async def get_rewards():
    return REWARDS


@router.get("/{client_id}", response_model=LoyaltySummaryResponse)
async def get_loyalty_summary(
    client_id: str, service: LoyaltyService = Depends(get_loyalty_service)
):
    """Points balance, progress to the next reward and recent history"""
    summary = service.get_summary(client_id)
    summary["history"] = [LoyaltyEntryResponse.from_model(e) for e in summary["history"]]
    return summary


@router.post("/{client_id}/redeem", response_model=RedeemResponse)
async def redeem_reward(
    client_id: str,
    data: RedeemRequest,
    service: LoyaltyService = Depends(get_loyalty_service),
):
    return service.redeem(client_id, data.rewardId)
