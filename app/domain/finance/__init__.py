"""Finance domain - income and expense transactions"""

from .router import router
from .service import FinanceService

__all__ = ["router", "FinanceService"]
