"""
Case/client relationship manager.

Maintains the many-to-many association through the junction table, which is
the single source of truth: ``Case.clients`` and ``Client.cases`` are read
from it, never stored separately. Existence of both ends is checked by the
calling service.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from legalcase.db import models
from legalcase.db.repositories import case_clients as link_repo
from legalcase.errors import DuplicateKeyError

logger = logging.getLogger(__name__)


class CaseClientRelationshipManager:
    """Link, unlink and look up clients of cases and cases of clients."""

    def __init__(self, db: Session):
        self.db = db

    def link(self, case_id: int, client_id: int) -> models.CaseClient:
        """Create the link, or return the existing one for the same pair."""
        existing = link_repo.get_case_client(self.db, case_id, client_id)
        if existing is not None:
            logger.debug("Client %s already linked to case %s", client_id, case_id)
            return existing
        try:
            link = link_repo.create_case_client(self.db, case_id, client_id)
        except DuplicateKeyError:
            # Another writer inserted the same pair after the lookup above.
            existing = link_repo.get_case_client(self.db, case_id, client_id)
            if existing is None:
                raise
            return existing
        logger.info("Linked client %s to case %s", client_id, case_id)
        return link

    def unlink(self, case_id: int, client_id: int) -> int:
        """Remove the link; returns the number of junction rows deleted (0 is a no-op)."""
        removed = link_repo.delete_case_client(self.db, case_id, client_id)
        if removed:
            logger.info("Unlinked client %s from case %s", client_id, case_id)
        return removed

    def is_linked(self, case_id: int, client_id: int) -> bool:
        return link_repo.get_case_client(self.db, case_id, client_id) is not None

    def clients_for_case(self, case_id: int) -> List[models.Client]:
        return link_repo.get_clients_for_case(self.db, case_id)

    def cases_for_client(self, client_id: int) -> List[models.Case]:
        return link_repo.get_cases_for_client(self.db, client_id)
