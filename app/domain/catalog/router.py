"""Service catalog router"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from .service import CatalogService

router = APIRouter(prefix="/api/services", tags=["Services"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(db)


@router.get("", response_model=list[ServiceResponse])
async def get_services(service: CatalogService = Depends(get_catalog_service)):
    return [ServiceResponse.from_model(s) for s in service.get_services()]


@router.get("/active", response_model=list[ServiceResponse])
async def get_active_services(service: CatalogService = Depends(get_catalog_service)):
    """Services offered in the customer app"""
    return [ServiceResponse.from_model(s) for s in service.get_services(active_only=True)]


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, service: CatalogService = Depends(get_catalog_service)):
    return ServiceResponse.from_model(service.get_service(service_id))


@router.post("", response_model=ServiceResponse, status_code=201)
async def create_service(data: ServiceCreate, service: CatalogService = Depends(get_catalog_service)):
    return ServiceResponse.from_model(service.create_service(data))


@router.patch("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    service: CatalogService = Depends(get_catalog_service),
):
    return ServiceResponse.from_model(service.update_service(service_id, data))


@router.delete("/{service_id}", status_code=204)
async def delete_service(service_id: str, service: CatalogService = Depends(get_catalog_service)):
    service.delete_service(service_id)
    return Response(status_code=204)
