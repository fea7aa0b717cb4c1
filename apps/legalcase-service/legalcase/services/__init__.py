"""Business logic services package with public service helpers."""

from .auth_service import AuthService, AuthSession
from .case_service import CaseService
from .client_service import ClientService
from .document_service import DocumentService
from .hearing_service import HearingService
from .relationship_manager import CaseClientRelationshipManager

__all__ = [
    "AuthService",
    "AuthSession",
    "CaseService",
    "ClientService",
    "DocumentService",
    "HearingService",
    "CaseClientRelationshipManager",
]
