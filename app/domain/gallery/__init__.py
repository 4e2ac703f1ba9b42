"""Gallery domain - portfolio images"""

from .router import router
from .service import GalleryService

__all__ = ["router", "GalleryService"]
