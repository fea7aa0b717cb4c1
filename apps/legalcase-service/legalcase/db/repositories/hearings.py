"""
Hearing repository functions.

Implements hearing CRUD and the scheduling queries (date range, upcoming).
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.store import store_operation
from legalcase.db.repositories.base import apply_update, delete_instance


@store_operation("create hearing")
def create_hearing(
    db: Session,
    hearing: schemas.HearingCreate,
    *,
    status: models.HearingStatus = models.HearingStatus.SCHEDULED,
) -> models.Hearing:
    db_hearing = models.Hearing(
        case_id=hearing.case_id,
        hearing_date=hearing.hearing_date,
        judge=hearing.judge,
        location=hearing.location,
        notes=hearing.notes,
        status=status,
    )
    db.add(db_hearing)
    db.commit()
    db.refresh(db_hearing)
    return db_hearing


@store_operation("retrieve hearing")
def get_hearing(db: Session, hearing_id: int) -> Optional[models.Hearing]:
    return db.query(models.Hearing).filter(models.Hearing.id == hearing_id).first()


@store_operation("retrieve hearings")
def get_hearings(db: Session, *, descending: bool = False) -> List[models.Hearing]:
    order = models.Hearing.hearing_date.desc() if descending else models.Hearing.hearing_date.asc()
    return db.query(models.Hearing).order_by(order, models.Hearing.id).all()


@store_operation("retrieve hearings for case")
def get_hearings_by_case(db: Session, case_id: int) -> List[models.Hearing]:
    return (
        db.query(models.Hearing)
        .filter(models.Hearing.case_id == case_id)
        .order_by(models.Hearing.hearing_date, models.Hearing.id)
        .all()
    )


@store_operation("retrieve hearings by status")
def get_hearings_by_status(db: Session, status: models.HearingStatus) -> List[models.Hearing]:
    return (
        db.query(models.Hearing)
        .filter(models.Hearing.status == status)
        .order_by(models.Hearing.hearing_date, models.Hearing.id)
        .all()
    )


@store_operation("retrieve hearings by date range")
def get_hearings_by_date_range(db: Session, start: datetime, end: datetime) -> List[models.Hearing]:
    """Hearings dated within [start, end], both ends inclusive."""
    return (
        db.query(models.Hearing)
        .filter(
            models.Hearing.hearing_date >= start,
            models.Hearing.hearing_date <= end,
        )
        .order_by(models.Hearing.hearing_date, models.Hearing.id)
        .all()
    )


@store_operation("retrieve upcoming hearings")
def get_upcoming_hearings(db: Session, now: datetime) -> List[models.Hearing]:
    """Hearings strictly after ``now`` that are not cancelled, earliest first."""
    return (
        db.query(models.Hearing)
        .filter(
            models.Hearing.hearing_date > now,
            models.Hearing.status != models.HearingStatus.CANCELLED,
        )
        .order_by(models.Hearing.hearing_date.asc(), models.Hearing.id.asc())
        .all()
    )


@store_operation("update hearing")
def update_hearing(db: Session, hearing_id: int, hearing: schemas.HearingUpdate) -> int:
    return apply_update(db, models.Hearing, hearing_id, hearing.model_dump(exclude_unset=True))


@store_operation("delete hearing")
def delete_hearing(db: Session, hearing_id: int) -> int:
    return delete_instance(db, models.Hearing, hearing_id)
