"""Appointments domain - booking, rescheduling, cancellation and extra services"""

from .router import router
from .service import BookingService

__all__ = ["router", "BookingService"]
