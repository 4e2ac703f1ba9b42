"""Catalog domain - the salon's bookable services"""

from .router import router
from .service import CatalogService

__all__ = ["router", "CatalogService"]
