"""
Client repository functions.

Implements client CRUD, lookup by email, and name search.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.store import store_operation
from legalcase.db.repositories.base import apply_update, delete_instance, like_pattern


@store_operation("create client", unique_fields=("email",))
def create_client(db: Session, client: schemas.ClientCreate) -> models.Client:
    db_client = models.Client(
        first_name=client.first_name,
        last_name=client.last_name,
        email=client.email,
        phone=client.phone,
        address=client.address,
    )
    db.add(db_client)
    db.commit()
    db.refresh(db_client)
    return db_client


@store_operation("retrieve client")
def get_client(db: Session, client_id: int) -> Optional[models.Client]:
    return db.query(models.Client).filter(models.Client.id == client_id).first()


@store_operation("retrieve client by email")
def get_client_by_email(db: Session, email: str) -> Optional[models.Client]:
    return db.query(models.Client).filter(models.Client.email == email).first()


@store_operation("retrieve clients")
def get_clients(db: Session, *, descending: bool = False) -> List[models.Client]:
    order = models.Client.id.desc() if descending else models.Client.id.asc()
    return db.query(models.Client).order_by(order).all()


@store_operation("search clients")
def search_clients_by_name(db: Session, term: str) -> List[models.Client]:
    """Case-insensitive substring match on first OR last name."""
    pattern = like_pattern(term)
    return (
        db.query(models.Client)
        .filter(
            or_(
                models.Client.first_name.ilike(pattern, escape="\\"),
                models.Client.last_name.ilike(pattern, escape="\\"),
            )
        )
        .order_by(models.Client.last_name, models.Client.first_name)
        .all()
    )


@store_operation("update client", unique_fields=("email",))
def update_client(db: Session, client_id: int, client: schemas.ClientUpdate) -> int:
    return apply_update(db, models.Client, client_id, client.model_dump(exclude_unset=True))


@store_operation("delete client")
def delete_client(db: Session, client_id: int) -> int:
    return delete_instance(db, models.Client, client_id)
