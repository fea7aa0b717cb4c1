"""
Document repository functions.

Documents hold text content only; there is no attachment storage.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.store import store_operation
from legalcase.db.repositories.base import apply_update, delete_instance, like_pattern


@store_operation("create document")
def create_document(db: Session, document: schemas.DocumentCreate) -> models.Document:
    db_document = models.Document(
        case_id=document.case_id,
        title=document.title,
        document_type=document.document_type,
        content=document.content,
    )
    db.add(db_document)
    db.commit()
    db.refresh(db_document)
    return db_document


@store_operation("retrieve document")
def get_document(db: Session, document_id: int) -> Optional[models.Document]:
    return db.query(models.Document).filter(models.Document.id == document_id).first()


@store_operation("retrieve documents")
def get_documents(db: Session, *, descending: bool = False) -> List[models.Document]:
    order = models.Document.id.desc() if descending else models.Document.id.asc()
    return db.query(models.Document).order_by(order).all()


@store_operation("retrieve documents for case")
def get_documents_by_case(db: Session, case_id: int) -> List[models.Document]:
    return (
        db.query(models.Document)
        .filter(models.Document.case_id == case_id)
        .order_by(models.Document.id)
        .all()
    )


@store_operation("retrieve documents by type")
def get_documents_by_type(db: Session, document_type: models.DocumentType) -> List[models.Document]:
    return (
        db.query(models.Document)
        .filter(models.Document.document_type == document_type)
        .order_by(models.Document.id)
        .all()
    )


@store_operation("search documents")
def search_documents_by_title(db: Session, term: str) -> List[models.Document]:
    return (
        db.query(models.Document)
        .filter(models.Document.title.ilike(like_pattern(term), escape="\\"))
        .order_by(models.Document.id)
        .all()
    )


@store_operation("update document")
def update_document(db: Session, document_id: int, document: schemas.DocumentUpdate) -> int:
    return apply_update(db, models.Document, document_id, document.model_dump(exclude_unset=True))


@store_operation("delete document")
def delete_document(db: Session, document_id: int) -> int:
    return delete_instance(db, models.Document, document_id)
