"""Clients domain - registration, CPF login and client management"""

from .router import router
from .service import ClientService

__all__ = ["router", "ClientService"]
