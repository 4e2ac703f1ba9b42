"""Client service - Business logic for client operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Client, Transaction
from ...shared.validators import only_digits
from .repository import ClientRepository
from .schemas import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def get_clients(self, search: Optional[str] = None) -> list[Client]:
        return self.repo.get_clients(self.db, search)

    def get_client(self, client_id: str) -> Client:
        client = self.repo.get_client_by_id(self.db, client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        return client

    def login(self, cpf: str) -> Client:
        """Customer app login: look a client up by CPF"""
        digits = only_digits(cpf)
        if len(digits) != 11:
            raise HTTPException(status_code=400, detail="CPF deve ter 11 dígitos")

        client = self.repo.get_client_by_cpf(self.db, digits)
        if not client:
            logger.info("🔍 Login attempt for unknown CPF")
            raise HTTPException(status_code=404, detail="Cliente não encontrado")
        return client

    def create_client(self, data: ClientCreate) -> Client:
        if self.repo.get_client_by_cpf(self.db, data.cpf):
            logger.warning("⚠️ Client creation rejected: CPF already registered")
            raise HTTPException(status_code=409, detail="Cliente já existe com este CPF")

        client = self.repo.create_client(
            self.db,
            name=data.name,
            cpf=data.cpf,
            email=data.email,
            phone=data.phone,
            notes=data.notes,
            points=data.points or 0,
        )
        logger.info(f"📥 Created client {client.id}")
        return client

    def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        client = self.get_client(client_id)

        if data.cpf is not None and data.cpf != client.cpf:
            if self.repo.get_client_by_cpf(self.db, data.cpf):
                raise HTTPException(status_code=409, detail="Cliente já existe com este CPF")

        updates = {}
        if data.name is not None:
            updates["name"] = data.name.strip()
        if data.cpf is not None:
            updates["cpf"] = data.cpf
        if data.email is not None:
            updates["email"] = data.email
        if data.phone is not None:
            updates["phone"] = data.phone
        if data.notes is not None:
            updates["notes"] = data.notes
        if data.points is not None:
            updates["points"] = data.points

        return self.repo.update_client(self.db, client, **updates)

    def delete_client(self, client_id: str) -> None:
        """Delete a client with their appointments; financial records are kept"""
        client = self.get_client(client_id)

        # Keep transactions for the books, just unlink them (FK constraint)
        self.db.query(Transaction).filter(Transaction.client_id == client.id).update(
            {Transaction.client_id: None}, synchronize_session=False
        )
        appointment_ids = [a.id for a in client.appointments]
        if appointment_ids:
            self.db.query(Transaction).filter(
                Transaction.appointment_id.in_(appointment_ids)
            ).update({Transaction.appointment_id: None}, synchronize_session=False)

        self.repo.delete_client(self.db, client)
        logger.info(f"🗑️ Deleted client {client_id}")
