"""Client repository - Database operations for clients"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Client


class ClientRepository:
    """Repository for client database operations"""

    @staticmethod
    def get_clients(db: Session, search: Optional[str] = None) -> list[Client]:
        """Get all clients, newest first, optionally filtered by name, CPF or phone"""
        query = db.query(Client)

        if search:
            search_term = f"%{search.lower()}%"
            query = query.filter(
                (func.lower(Client.name).like(search_term))
                | (Client.cpf.like(search_term))
                | (Client.phone.like(search_term))
            )

        return query.order_by(Client.created_at.desc()).all()

    @staticmethod
    def get_client_by_id(db: Session, client_id: str) -> Optional[Client]:
        return db.query(Client).filter(Client.id == client_id).first()

    @staticmethod
    def get_client_by_cpf(db: Session, cpf: str) -> Optional[Client]:
        return db.query(Client).filter(Client.cpf == cpf).first()

    @staticmethod
    def create_client(db: Session, **client_data) -> Client:
        client = Client(**client_data)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def update_client(db: Session, client: Client, **updates) -> Client:
        """Update a client with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(client, key):
                setattr(client, key, value)

        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def delete_client(db: Session, client: Client) -> None:
        db.delete(client)
        db.commit()

    @staticmethod
    def count_created_since(db: Session, since: datetime) -> int:
        return db.query(func.count(Client.id)).filter(Client.created_at >= since).scalar() or 0

    @staticmethod
    def get_recent_clients(db: Session, limit: int) -> list[Client]:
        return db.query(Client).order_by(Client.created_at.desc()).limit(limit).all()
