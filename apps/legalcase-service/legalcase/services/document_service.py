"""
Document service: text documents owned by cases.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.repositories import cases as case_repo
from legalcase.db.repositories import documents as document_repo
from legalcase.errors import NotFoundError
from legalcase.services.common import build_payload, require, require_search_term, resolve_changes

logger = logging.getLogger(__name__)


class DocumentService:
    """Service class for document operations."""

    def __init__(self, db: Session):
        self.db = db

    def _require_document(self, document_id: int) -> models.Document:
        return require(document_repo.get_document(self.db, document_id), "Document", document_id)

    def create_document(
        self,
        case_id: int,
        title: str,
        document_type: models.DocumentType,
        content: Optional[str] = None,
    ) -> models.Document:
        payload = build_payload(
            schemas.DocumentCreate,
            case_id=case_id,
            title=title,
            document_type=document_type,
            content=content,
        )
        require(case_repo.get_case(self.db, case_id), "Case", case_id)
        document = document_repo.create_document(self.db, payload)
        logger.info("Created document %s on case %s", document.id, case_id)
        return document

    def get_document(self, document_id: int) -> Optional[models.Document]:
        return document_repo.get_document(self.db, document_id)

    def get_document_content(self, document_id: int) -> Optional[str]:
        return self._require_document(document_id).content

    def list_documents(self, *, descending: bool = False) -> List[models.Document]:
        return document_repo.get_documents(self.db, descending=descending)

    def list_documents_for_case(self, case_id: int) -> List[models.Document]:
        require(case_repo.get_case(self.db, case_id), "Case", case_id)
        return document_repo.get_documents_by_case(self.db, case_id)

    def list_documents_by_type(self, document_type: models.DocumentType) -> List[models.Document]:
        return document_repo.get_documents_by_type(self.db, document_type)

    def search_documents_by_title(self, term: str) -> List[models.Document]:
        return document_repo.search_documents_by_title(self.db, require_search_term(term))

    def update_document(
        self,
        document_id: int,
        changes: Optional[schemas.DocumentUpdate] = None,
        **fields,
    ) -> models.Document:
        """Overwrite every field the caller sets; unset fields stay as they are."""
        changes = resolve_changes(schemas.DocumentUpdate, changes, fields)
        self._require_document(document_id)
        if document_repo.update_document(self.db, document_id, changes) == 0:
            raise NotFoundError("Document", document_id)
        logger.info("Updated document %s (%s)", document_id, ", ".join(sorted(changes.model_fields_set)))
        return self._require_document(document_id)

    def delete_document(self, document_id: int) -> None:
        self._require_document(document_id)
        if document_repo.delete_document(self.db, document_id) == 0:
            raise NotFoundError("Document", document_id)
        logger.info("Deleted document %s", document_id)
