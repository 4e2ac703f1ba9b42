"""Loyalty domain - points ledger and rewards"""

from .router import router
from .service import LoyaltyService

__all__ = ["router", "LoyaltyService"]
