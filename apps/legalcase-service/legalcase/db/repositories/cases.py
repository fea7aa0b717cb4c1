"""
Case repository functions.

Implements case CRUD plus lookups by case number, status, type and title.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.store import store_operation
from legalcase.db.repositories.base import apply_update, delete_instance, like_pattern


@store_operation("create case", unique_fields=("case_number",))
def create_case(db: Session, case: schemas.CaseCreate, *, status: models.CaseStatus = models.CaseStatus.NEW) -> models.Case:
    db_case = models.Case(
        case_number=case.case_number,
        title=case.title,
        case_type=case.case_type,
        description=case.description,
        status=status,
    )
    db.add(db_case)
    db.commit()
    db.refresh(db_case)
    return db_case


@store_operation("retrieve case")
def get_case(db: Session, case_id: int) -> Optional[models.Case]:
    return db.query(models.Case).filter(models.Case.id == case_id).first()


@store_operation("retrieve case by number")
def get_case_by_number(db: Session, case_number: str) -> Optional[models.Case]:
    return db.query(models.Case).filter(models.Case.case_number == case_number).first()


@store_operation("retrieve cases")
def get_cases(db: Session, *, descending: bool = False) -> List[models.Case]:
    order = models.Case.id.desc() if descending else models.Case.id.asc()
    return db.query(models.Case).order_by(order).all()


@store_operation("retrieve cases by status")
def get_cases_by_status(db: Session, status: models.CaseStatus) -> List[models.Case]:
    return (
        db.query(models.Case)
        .filter(models.Case.status == status)
        .order_by(models.Case.id)
        .all()
    )


@store_operation("retrieve cases by type")
def get_cases_by_type(db: Session, case_type: models.CaseType) -> List[models.Case]:
    return (
        db.query(models.Case)
        .filter(models.Case.case_type == case_type)
        .order_by(models.Case.id)
        .all()
    )


@store_operation("search cases")
def search_cases_by_title(db: Session, term: str) -> List[models.Case]:
    return (
        db.query(models.Case)
        .filter(models.Case.title.ilike(like_pattern(term), escape="\\"))
        .order_by(models.Case.id)
        .all()
    )


@store_operation("update case", unique_fields=("case_number",))
def update_case(db: Session, case_id: int, case: schemas.CaseUpdate) -> int:
    return apply_update(db, models.Case, case_id, case.model_dump(exclude_unset=True))


@store_operation("delete case")
def delete_case(db: Session, case_id: int) -> int:
    """Delete a case; its hearings, documents and client links go with it."""
    return delete_instance(db, models.Case, case_id)
