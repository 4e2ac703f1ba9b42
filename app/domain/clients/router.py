"""Client router - FastAPI endpoints for client operations"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ...config import LOGIN_RATE_LIMIT
from ...database import get_db
from ...rate_limiter import create_rate_limiter
from .schemas import ClientCreate, ClientLogin, ClientResponse, ClientUpdate
from .service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clients", tags=["Clients"])

login_rate_limit = create_rate_limiter(
    limit=LOGIN_RATE_LIMIT, window_seconds=60, key_prefix="client_login"
)


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


@router.get("", response_model=list[ClientResponse])
async def get_clients(
    search: Optional[str] = Query(None, description="Filter by name, CPF or phone"),
    service: ClientService = Depends(get_client_service),
):
    """Get all clients, newest first"""
    return [ClientResponse.from_model(c) for c in service.get_clients(search)]


@router.post("/login", response_model=ClientResponse)
async def login_client(
    data: ClientLogin,
    service: ClientService = Depends(get_client_service),
    _: None = Depends(login_rate_limit),
):
    """Customer app login by CPF"""
    return ClientResponse.from_model(service.login(data.cpf))


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: str, service: ClientService = Depends(get_client_service)):
    return ClientResponse.from_model(service.get_client(client_id))


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(data: ClientCreate, service: ClientService = Depends(get_client_service)):
    """Register a new client (CPF must be unique)"""
    return ClientResponse.from_model(service.create_client(data))


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
):
    return ClientResponse.from_model(service.update_client(client_id, data))


@router.delete("/{client_id}", status_code=204)
async def delete_client(client_id: str, service: ClientService = Depends(get_client_service)):
    service.delete_client(client_id)
    return Response(status_code=204)
