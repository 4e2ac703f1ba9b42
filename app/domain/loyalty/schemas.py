"""Loyalty program schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...shared.schemas import UTCResponse


class RewardResponse(BaseModel):
    id: int
    name: str
    description: str
    points: int
    available: bool


class LoyaltyEntryResponse(UTCResponse):
    id: str
    points: int
    type: str  # earned, redeemed
    description: str
    appointmentId: Optional[str] = None
    createdAt: datetime

    @classmethod
    def from_model(cls, entry) -> "LoyaltyEntryResponse":
        return cls(
            id=entry.id,
            points=entry.points,
            type="earned" if entry.points >= 0 else "redeemed",
            description=entry.description,
            appointmentId=entry.appointment_id,
            createdAt=entry.created_at,
        )


class LoyaltySummaryResponse(BaseModel):
    clientId: str
    points: int
    nextReward: Optional[RewardResponse] = None
    pointsToNextReward: int
    progressPercentage: int
    history: list[LoyaltyEntryResponse]


class RedeemRequest(BaseModel):
    rewardId: int


class RedeemResponse(BaseModel):
    message: str
    reward: RewardResponse
    remainingPoints: int
