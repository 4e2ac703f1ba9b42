"""Loyalty service - points earned on completed appointments and reward redemption"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment, Client, LoyaltyEntry

logger = logging.getLogger(__name__)

REWARDS = [
    {"id": 1, "name": "Desconto 20%", "description": "No próximo serviço", "points": 50, "available": True},
    {"id": 2, "name": "Nail Art Premium", "description": "Design personalizado", "points": 100, "available": True},
    {"id": 3, "name": "Spa Completo", "description": "Mão + Pé + Hidratação", "points": 200, "available": False},
    {"id": 4, "name": "Curso Básico", "description": "Técnicas de manicure", "points": 300, "available": False},
]

HISTORY_LIMIT = 20


def get_reward(reward_id: int) -> Optional[dict]:
    return next((r for r in REWARDS if r["id"] == reward_id), None)


def next_reward_for(points: int) -> Optional[dict]:
    """Cheapest reward the client cannot afford yet"""
    return next((r for r in sorted(REWARDS, key=lambda r: r["points"]) if r["points"] > points), None)


class LoyaltyService:
    def __init__(self, db: Session):
        self.db = db

    def _get_client(self, client_id: str) -> Client:
        client = self.db.query(Client).filter(Client.id == client_id).first()
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        return client

    def award_for_appointment(self, appointment: Appointment) -> int:
        """
        Credit the service's points for a completed appointment.

        Idempotent per appointment; the caller commits.
        """
        if appointment.points_awarded:
            return 0

        points = appointment.service.points if appointment.service else 0
        appointment.points_awarded = True
        if not points:
            return 0

        appointment.client.points = (appointment.client.points or 0) + points
        self.db.add(
            LoyaltyEntry(
                client_id=appointment.client_id,
                points=points,
                description=appointment.service.name,
                appointment_id=appointment.id,
            )
        )
        logger.info(f"⭐ Awarded {points} points to client {appointment.client_id}")
        return points

    def get_summary(self, client_id: str) -> dict:
        client = self._get_client(client_id)
        points = client.points or 0

        reward = next_reward_for(points)
        if reward:
            to_next = reward["points"] - points
            progress = int(points * 100 / reward["points"])
        else:
            to_next = 0
            progress = 100

        history = (
            self.db.query(LoyaltyEntry)
            .filter(LoyaltyEntry.client_id == client.id)
            .order_by(LoyaltyEntry.created_at.desc())
            .limit(HISTORY_LIMIT)
            .all()
        )

        return {
            "clientId": client.id,
            "points": points,
            "nextReward": reward,
            "pointsToNextReward": to_next,
            "progressPercentage": progress,
            "history": history,
        }

    def redeem(self, client_id: str, reward_id: int) -> dict:
        client = self._get_client(client_id)

        reward = get_reward(reward_id)
        if not reward:
            raise HTTPException(status_code=404, detail="Recompensa não encontrada")
        if not reward["available"]:
            raise HTTPException(status_code=400, detail="Recompensa indisponível")
        if (client.points or 0) < reward["points"]:
            raise HTTPException(status_code=400, detail="Pontos insuficientes")

        client.points = client.points - reward["points"]
        self.db.add(
            LoyaltyEntry(
                client_id=client.id,
                points=-reward["points"],
                description=f"{reward['name']} resgatado",
            )
        )
        self.db.commit()
        self.db.refresh(client)

        logger.info(f"🎁 Client {client.id} redeemed reward {reward['id']}")
        return {
            "message": "Recompensa resgatada com sucesso",
            "reward": reward,
            "remainingPoints": client.points,
        }
