"""
Case service: case lifecycle, case-number uniqueness and the client links.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.repositories import cases as case_repo
from legalcase.db.repositories import clients as client_repo
from legalcase.errors import DuplicateKeyError, NotFoundError
from legalcase.services.common import build_payload, require, require_search_term, resolve_changes
from legalcase.services.relationship_manager import CaseClientRelationshipManager

logger = logging.getLogger(__name__)


class CaseService:
    """Service class for case operations."""

    def __init__(self, db: Session, relationships: Optional[CaseClientRelationshipManager] = None):
        self.db = db
        self.relationships = relationships or CaseClientRelationshipManager(db)

    def _require_case(self, case_id: int) -> models.Case:
        return require(case_repo.get_case(self.db, case_id), "Case", case_id)

    def _require_client(self, client_id: int) -> models.Client:
        return require(client_repo.get_client(self.db, client_id), "Client", client_id)

    def create_case(
        self,
        case_number: Optional[str],
        title: str,
        case_type: models.CaseType,
        description: Optional[str] = None,
    ) -> models.Case:
        """Create a case. New cases always start in status NEW."""
        payload = build_payload(
            schemas.CaseCreate,
            case_number=case_number,
            title=title,
            case_type=case_type,
            description=description,
        )
        if payload.case_number:
            if case_repo.get_case_by_number(self.db, payload.case_number) is not None:
                raise DuplicateKeyError("case_number", payload.case_number)
        case = case_repo.create_case(self.db, payload, status=models.CaseStatus.NEW)
        logger.info("Created case %s (%s)", case.id, case.case_number)
        return case

    def get_case(self, case_id: int) -> Optional[models.Case]:
        return case_repo.get_case(self.db, case_id)

    def get_case_by_number(self, case_number: str) -> Optional[models.Case]:
        return case_repo.get_case_by_number(self.db, case_number)

    def list_cases(self, *, descending: bool = False) -> List[models.Case]:
        return case_repo.get_cases(self.db, descending=descending)

    def list_cases_by_status(self, status: models.CaseStatus) -> List[models.Case]:
        return case_repo.get_cases_by_status(self.db, status)

    def list_cases_by_type(self, case_type: models.CaseType) -> List[models.Case]:
        return case_repo.get_cases_by_type(self.db, case_type)

    def search_cases_by_title(self, term: str) -> List[models.Case]:
        return case_repo.search_cases_by_title(self.db, require_search_term(term))

    def update_case(
        self,
        case_id: int,
        changes: Optional[schemas.CaseUpdate] = None,
        **fields,
    ) -> models.Case:
        """Overwrite every field the caller sets, status included.

        Any status may follow any other; there is no transition graph.
        """
        changes = resolve_changes(schemas.CaseUpdate, changes, fields)
        case = self._require_case(case_id)

        if "case_number" in changes.model_fields_set and changes.case_number and changes.case_number != case.case_number:
            holder = case_repo.get_case_by_number(self.db, changes.case_number)
            if holder is not None and holder.id != case_id:
                raise DuplicateKeyError("case_number", changes.case_number)

        if case_repo.update_case(self.db, case_id, changes) == 0:
            raise NotFoundError("Case", case_id)
        logger.info("Updated case %s (%s)", case_id, ", ".join(sorted(changes.model_fields_set)))
        return self._require_case(case_id)

    def delete_case(self, case_id: int) -> None:
        """Delete a case with its hearings, documents and client links."""
        self._require_case(case_id)
        if case_repo.delete_case(self.db, case_id) == 0:
            raise NotFoundError("Case", case_id)
        logger.info("Deleted case %s", case_id)

    def add_client_to_case(self, case_id: int, client_id: int) -> models.CaseClient:
        self._require_case(case_id)
        self._require_client(client_id)
        return self.relationships.link(case_id, client_id)

    def remove_client_from_case(self, case_id: int, client_id: int) -> int:
        """Remove a client from a case; an absent link is a no-op returning 0."""
        self._require_case(case_id)
        self._require_client(client_id)
        return self.relationships.unlink(case_id, client_id)

    def get_clients_for_case(self, case_id: int) -> List[models.Client]:
        self._require_case(case_id)
        return self.relationships.clients_for_case(case_id)

    def get_cases_for_client(self, client_id: int) -> List[models.Case]:
        self._require_client(client_id)
        return self.relationships.cases_for_client(client_id)
