"""
Case/client junction repository functions.

The junction table is the only record of which clients belong to which
cases; both lookup directions join through it.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models
from legalcase.db.store import store_operation


@store_operation("link client to case", unique_fields=("client_id",))
def create_case_client(db: Session, case_id: int, client_id: int) -> models.CaseClient:
    db_link = models.CaseClient(case_id=case_id, client_id=client_id)
    db.add(db_link)
    db.commit()
    db.refresh(db_link)
    return db_link


@store_operation("retrieve case client link")
def get_case_client(db: Session, case_id: int, client_id: int) -> Optional[models.CaseClient]:
    return (
        db.query(models.CaseClient)
        .filter(
            models.CaseClient.case_id == case_id,
            models.CaseClient.client_id == client_id,
        )
        .first()
    )


@store_operation("unlink client from case")
def delete_case_client(db: Session, case_id: int, client_id: int) -> int:
    count = (
        db.query(models.CaseClient)
        .filter(
            models.CaseClient.case_id == case_id,
            models.CaseClient.client_id == client_id,
        )
        .delete(synchronize_session="fetch")
    )
    db.commit()
    return count


@store_operation("retrieve clients for case")
def get_clients_for_case(db: Session, case_id: int) -> List[models.Client]:
    return (
        db.query(models.Client)
        .join(models.CaseClient, models.CaseClient.client_id == models.Client.id)
        .filter(models.CaseClient.case_id == case_id)
        .order_by(models.CaseClient.id)
        .all()
    )


@store_operation("retrieve cases for client")
def get_cases_for_client(db: Session, client_id: int) -> List[models.Case]:
    return (
        db.query(models.Case)
        .join(models.CaseClient, models.CaseClient.case_id == models.Case.id)
        .filter(models.CaseClient.client_id == client_id)
        .order_by(models.CaseClient.id)
        .all()
    )
