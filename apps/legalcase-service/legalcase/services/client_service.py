"""
Client service: client lifecycle with email uniqueness checks.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.repositories import clients as client_repo
from legalcase.errors import DuplicateKeyError, NotFoundError
from legalcase.services.common import build_payload, require, require_search_term, resolve_changes

logger = logging.getLogger(__name__)


class ClientService:
    """Service class for client operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_client(
        self,
        first_name: str,
        last_name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> models.Client:
        """Create a client. A non-empty email must not belong to another client."""
        payload = build_payload(
            schemas.ClientCreate,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            address=address,
        )
        if payload.email:
            if client_repo.get_client_by_email(self.db, payload.email) is not None:
                raise DuplicateKeyError("email", payload.email)
        client = client_repo.create_client(self.db, payload)
        logger.info("Created client %s", client.id)
        return client

    def get_client(self, client_id: int) -> Optional[models.Client]:
        return client_repo.get_client(self.db, client_id)

    def get_client_by_email(self, email: str) -> Optional[models.Client]:
        return client_repo.get_client_by_email(self.db, email)

    def list_clients(self, *, descending: bool = False) -> List[models.Client]:
        return client_repo.get_clients(self.db, descending=descending)

    def search_clients(self, term: str) -> List[models.Client]:
        """Case-insensitive partial match over first name or last name."""
        return client_repo.search_clients_by_name(self.db, require_search_term(term))

    def update_client(
        self,
        client_id: int,
        changes: Optional[schemas.ClientUpdate] = None,
        **fields,
    ) -> models.Client:
        """Overwrite every field the caller sets; unset fields stay as they are."""
        changes = resolve_changes(schemas.ClientUpdate, changes, fields)
        client = require(client_repo.get_client(self.db, client_id), "Client", client_id)

        if "email" in changes.model_fields_set and changes.email and changes.email != client.email:
            holder = client_repo.get_client_by_email(self.db, changes.email)
            if holder is not None and holder.id != client_id:
                raise DuplicateKeyError("email", changes.email)

        if client_repo.update_client(self.db, client_id, changes) == 0:
            raise NotFoundError("Client", client_id)
        logger.info("Updated client %s (%s)", client_id, ", ".join(sorted(changes.model_fields_set)))
        return require(client_repo.get_client(self.db, client_id), "Client", client_id)

    def delete_client(self, client_id: int) -> None:
        """Delete a client and its case links; linked cases remain."""
        require(client_repo.get_client(self.db, client_id), "Client", client_id)
        if client_repo.delete_client(self.db, client_id) == 0:
            raise NotFoundError("Client", client_id)
        logger.info("Deleted client %s", client_id)
