"""Gallery router"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import GalleryImageCreate, GalleryImageResponse
from .service import GalleryService

router = APIRouter(prefix="/api/gallery", tags=["Gallery"])


def get_gallery_service(db: Session = Depends(get_db)) -> GalleryService:
    """Dependency injection for GalleryService"""
    return GalleryService(db)


@router.get("", response_model=list[GalleryImageResponse])
async def get_gallery_images(
    category: Optional[str] = Query(None),
    service: GalleryService = Depends(get_gallery_service),
):
    return [GalleryImageResponse.from_model(i) for i in service.get_images(category)]


@router.post("", response_model=GalleryImageResponse, status_code=201)
async def create_gallery_image(
    data: GalleryImageCreate, service: GalleryService = Depends(get_gallery_service)
):
    return GalleryImageResponse.from_model(service.create_image(data))


@router.delete("/{image_id}", status_code=204)
async def delete_gallery_image(image_id: str, service: GalleryService = Depends(get_gallery_service)):
    service.delete_image(image_id)
    return Response(status_code=204)
