"""Gallery service - portfolio images shown in the customer app"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import GalleryImage
from .schemas import GalleryImageCreate

logger = logging.getLogger(__name__)


class GalleryService:
    def __init__(self, db: Session):
        self.db = db

    def get_images(self, category: Optional[str] = None) -> list[GalleryImage]:
        query = self.db.query(GalleryImage)
        if category:
            query = query.filter(GalleryImage.category == category)
        return query.order_by(GalleryImage.created_at.desc()).all()

    def get_recent_images(self, limit: int) -> list[GalleryImage]:
        return self.db.query(GalleryImage).order_by(GalleryImage.created_at.desc()).limit(limit).all()

    def create_image(self, data: GalleryImageCreate) -> GalleryImage:
        image = GalleryImage(
            url=data.url,
            title=data.title,
            description=data.description,
            category=data.category,
        )
        self.db.add(image)
        self.db.commit()
        self.db.refresh(image)
        logger.info(f"📸 Added gallery image {image.id}")
        return image

    def delete_image(self, image_id: str) -> None:
        image = self.db.query(GalleryImage).filter(GalleryImage.id == image_id).first()
        if not image:
            raise HTTPException(status_code=404, detail="Gallery image not found")
        self.db.delete(image)
        self.db.commit()
